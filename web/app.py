import time
from typing import Optional
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from limbint import (
    LimbIntError, Verdict,
    add, compare, subtract, power_mod,
    miller_rabin, next_probable_prime, parse_decimal,
)
from limbint import config

app = Flask(__name__)

def _payload() -> dict:
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise BadRequest("expected a JSON object")
    return data

def _number(data: dict, key: str, limit: Optional[int] = None):
    limit = limit or config.MAX_DIGITS
    raw = data.get(key)
    if raw is None:
        raise BadRequest(f"missing {key}")
    s = str(raw).strip()
    if len(s) > limit:
        raise BadRequest(f"{key} longer than {limit} digits")
    return parse_decimal(s)

def _trials(data: dict):
    k = data.get("k", config.DEFAULT_TRIALS)
    # JSON true/1.5 must not sneak through as a trial count
    if type(k) is not int:
        raise BadRequest("k must be an integer")
    return k

@app.errorhandler(LimbIntError)
def on_limbint_error(e: LimbIntError):
    app.logger.info("rejected %s: %s", request.path, e)
    return jsonify(ok=False, error=type(e).__name__, detail=str(e)), 400

@app.errorhandler(BadRequest)
def on_bad_request(e: BadRequest):
    return jsonify(ok=False, error="BadRequest", detail=e.description), 400

@app.post("/api/prime")
def api_prime():
    data = _payload()
    n = _number(data, "n", config.MAX_WORK_DIGITS)
    t0 = time.perf_counter()
    res = miller_rabin(n, _trials(data), config.new_rng())
    dt_ms = int((time.perf_counter() - t0) * 1000)
    out = {"ok": True, "n": str(n), "result": res.verdict.value, "trials": res.trials,
           "duration_ms": dt_ms, "steps": res.steps}
    if res.verdict is Verdict.COMPOSITE and res.witness is not None:
        out["witness"] = str(res.witness)
    return jsonify(out)

@app.post("/api/next_prime")
def api_next_prime():
    data = _payload()
    p, iters = next_probable_prime(_number(data, "n", config.MAX_WORK_DIGITS), _trials(data),
                                   config.new_rng(), return_iters=True)
    return jsonify(ok=True, prime=str(p), iters=iters)

@app.post("/api/add")
def api_add():
    data = _payload()
    return jsonify(ok=True, result=str(add(_number(data, "a"), _number(data, "b"))))

@app.post("/api/subtract")
def api_subtract():
    data = _payload()
    return jsonify(ok=True, result=str(subtract(_number(data, "a"), _number(data, "b"))))

@app.post("/api/compare")
def api_compare():
    data = _payload()
    return jsonify(ok=True, result=compare(_number(data, "a"), _number(data, "b")).name)

@app.post("/api/power_mod")
def api_power_mod():
    data = _payload()
    lim = config.MAX_WORK_DIGITS
    b, e, m = _number(data, "base", lim), _number(data, "exponent", lim), _number(data, "modulus", lim)
    return jsonify(ok=True, result=str(power_mod(b, e, m)))

@app.get("/api/health")
def api_health():
    return jsonify(ok=True, trials=config.DEFAULT_TRIALS, max_digits=config.MAX_DIGITS,
                   max_work_digits=config.MAX_WORK_DIGITS)

if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT)
