import argparse, json, random
from concurrent.futures import ThreadPoolExecutor, as_completed
from sympy import randprime, isprime

from limbint import Verdict, miller_rabin, parse_decimal

# Known Carmichael numbers: fool Fermat, not Miller-Rabin
CARMICHAEL = [561, 1105, 1729, 2465, 2821, 6601, 8911, 41041, 62745, 825265,
              321197185, 5394826801, 232250619601, 9746347772161]

def rand_k_digit_prime(k):
    lo = 10**(k-1)
    hi = 10**k - 1
    return int(randprime(lo, hi))

def rand_semiprime(k):
    k1 = max(1, k//2)
    k2 = max(1, k - k1)
    return rand_k_digit_prime(k1) * rand_k_digit_prime(k2)

def rand_odd_composite(k):
    while True:
        n = random.randrange(10**(k-1), 10**k) | 1
        if not isprime(n):
            return n

def cases(digits):
    for n in CARMICHAEL:
        yield n, "carmichael"
    for k in digits:
        yield rand_k_digit_prime(k), "prime"
        yield rand_semiprime(k), "semiprime"
        yield rand_odd_composite(k), "composite"

def check_one(n, kind, trials, seed):
    # one generator per task; a shared Random would need a lock
    rng = random.Random(seed)
    res = miller_rabin(parse_decimal(str(n)), trials, rng)
    expect_prime = bool(isprime(n))
    got_prime = res.verdict is not Verdict.COMPOSITE
    return {"n": str(n), "kind": kind, "digits": len(str(n)), "expect_prime": expect_prime,
            "verdict": res.verdict.value, "ok": expect_prime == got_prime}

def main(argv=None):
    ap = argparse.ArgumentParser(description="cross-check Miller-Rabin against sympy.isprime")
    ap.add_argument("--digits", type=int, nargs="*", default=[5, 10, 20, 40, 80, 160, 309])
    ap.add_argument("-k", "--trials", type=int, default=10)
    ap.add_argument("--workers", type=int, default=4)
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args(argv)

    random.seed(args.seed)
    todo = list(cases(args.digits))
    results = []
    with ThreadPoolExecutor(max_workers=args.workers) as ex:
        futs = [ex.submit(check_one, n, kind, args.trials, random.randrange(2**63))
                for n, kind in todo]
        for f in as_completed(futs):
            results.append(f.result())

    fails = [r for r in results if not r["ok"]]
    summary = {"total": len(results), "ok": len(results) - len(fails), "fails": fails}
    print(json.dumps(summary, indent=2))
    return 1 if fails else 0

if __name__ == "__main__":
    raise SystemExit(main())
