import sys, argparse, random

from limbint import (
    LimbIntError, Verdict,
    add, compare, subtract, power_mod,
    miller_rabin, next_probable_prime, parse_decimal,
)
from limbint import config

def _err(e: LimbIntError) -> int:
    print(f"# error: {type(e).__name__}: {e}", file=sys.stderr)
    return 1

def check(s: str, k: int, rng: random.Random) -> int:
    try:
        res = miller_rabin(parse_decimal(s), k, rng)
    except LimbIntError as e:
        return _err(e)
    if res.verdict is Verdict.COMPOSITE and res.witness is not None:
        print(f"{s}\tcomposite\twitness={res.witness}")
    else:
        print(f"{s}\t{res.verdict.value}")
    return 0

def run_binary(op: str, a: str, b: str) -> int:
    try:
        x, y = parse_decimal(a), parse_decimal(b)
        if op == "add":
            print(add(x, y))
        elif op == "sub":
            print(subtract(x, y))
        else:
            print(compare(x, y).name)
    except LimbIntError as e:
        return _err(e)
    return 0

def main(argv=None):
    ap = argparse.ArgumentParser(description="limb-based big integers and Miller-Rabin")
    ap.add_argument("-k", "--trials", type=int, default=config.DEFAULT_TRIALS,
                    help="Miller-Rabin rounds per number")
    ap.add_argument("--seed", type=int, default=config.SEED, help="fixed witness seed")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("check", help="probable-prime test; reads stdin when no N given")
    p.add_argument("N", nargs="*")
    p = sub.add_parser("next", help="smallest probable prime >= N")
    p.add_argument("N")
    for name in ("add", "sub", "cmp"):
        p = sub.add_parser(name)
        p.add_argument("A")
        p.add_argument("B")
    p = sub.add_parser("powmod", help="B^E mod M")
    p.add_argument("B"); p.add_argument("E"); p.add_argument("M")
    args = ap.parse_args(argv)

    rng = random.Random(args.seed)
    rc = 0
    if args.cmd == "check":
        if args.N:
            for s in args.N:
                rc |= check(s, args.trials, rng)
        else:
            if sys.stdin.isatty():
                print("Enter numbers to check for primality, one per line.", file=sys.stderr)
            for line in sys.stdin:
                line = line.strip()
                if not line: continue
                rc |= check(line, args.trials, rng)
    elif args.cmd == "next":
        try:
            p, iters = next_probable_prime(parse_decimal(args.N), args.trials, rng, return_iters=True)
            print(f"{p}\titers={iters}")
        except LimbIntError as e:
            rc = _err(e)
    elif args.cmd == "powmod":
        try:
            print(power_mod(parse_decimal(args.B), parse_decimal(args.E), parse_decimal(args.M)))
        except LimbIntError as e:
            rc = _err(e)
    else:
        rc = run_binary(args.cmd, args.A, args.B)
    return rc

if __name__ == "__main__":
    raise SystemExit(main())
