import io

import pytest

import primality_cli
from web.app import app

@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c

class TestCli:
    def test_check_numbers(self, capsys):
        rc = primality_cli.main(["-k", "5", "--seed", "1", "check", "997", "561", "2"])
        out = capsys.readouterr().out.splitlines()
        assert rc == 0
        assert out[0] == "997\tprobably_prime"
        assert out[1].startswith("561\tcomposite\twitness=")
        assert out[2] == "2\tprime"

    def test_check_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("7\n\n9\n"))
        rc = primality_cli.main(["--seed", "3", "check"])
        out = capsys.readouterr().out.splitlines()
        assert rc == 0
        assert out[0] == "7\tprobably_prime"
        assert out[1].startswith("9\tcomposite")

    def test_bad_number_reports_error_and_continues(self, capsys):
        rc = primality_cli.main(["check", "12x", "5"])
        cap = capsys.readouterr()
        assert rc == 1
        assert "# error: InvalidFormat:" in cap.err
        assert cap.out.strip() == "5\tprobably_prime"

    def test_zero_trials(self, capsys):
        rc = primality_cli.main(["-k", "0", "check", "997"])
        assert rc == 1
        assert "InvalidConfiguration" in capsys.readouterr().err

    def test_arithmetic_commands(self, capsys):
        assert primality_cli.main(["add", "99999999999999999999", "1"]) == 0
        assert primality_cli.main(["sub", "100", "1"]) == 0
        assert primality_cli.main(["cmp", "5", "10"]) == 0
        assert primality_cli.main(["powmod", "4", "13", "497"]) == 0
        assert capsys.readouterr().out.split() == ["100000000000000000000", "99", "LESS", "445"]

    def test_negative_subtraction(self, capsys):
        assert primality_cli.main(["sub", "5", "10"]) == 1
        assert "NegativeResult" in capsys.readouterr().err

    def test_next(self, capsys):
        assert primality_cli.main(["next", "90"]) == 0
        assert capsys.readouterr().out.strip() == "97\titers=4"

    def test_powmod_zero_modulus(self, capsys):
        assert primality_cli.main(["powmod", "2", "3", "0"]) == 1
        assert "DivisionByZero" in capsys.readouterr().err

class TestWeb:
    def test_health(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert r.get_json()["ok"] is True

    def test_prime(self, client):
        r = client.post("/api/prime", json={"n": "997", "k": 10})
        body = r.get_json()
        assert r.status_code == 200
        assert body["result"] == "probably_prime"
        assert body["trials"] == 10

    def test_composite_has_witness(self, client):
        body = client.post("/api/prime", json={"n": "561", "k": 5}).get_json()
        assert body["result"] == "composite"
        assert "witness" in body

    def test_prime_accepts_json_number(self, client):
        body = client.post("/api/prime", json={"n": 3}).get_json()
        assert body["result"] == "prime"

    def test_zero_trials(self, client):
        r = client.post("/api/prime", json={"n": "997", "k": 0})
        assert r.status_code == 400
        assert r.get_json()["error"] == "InvalidConfiguration"

    def test_bool_trials_rejected(self, client):
        r = client.post("/api/prime", json={"n": "997", "k": True})
        assert r.status_code == 400
        assert r.get_json()["error"] == "BadRequest"

    def test_invalid_number(self, client):
        r = client.post("/api/prime", json={"n": "-7"})
        assert r.status_code == 400
        assert r.get_json()["error"] == "InvalidFormat"

    def test_missing_field(self, client):
        r = client.post("/api/add", json={"a": "1"})
        assert r.status_code == 400
        assert r.get_json()["detail"] == "missing b"

    def test_not_json(self, client):
        r = client.post("/api/add", data="nope", content_type="text/plain")
        assert r.status_code == 400

    def test_too_many_digits(self, client):
        r = client.post("/api/prime", json={"n": "1" * 5000})
        assert r.status_code == 400

    def test_arithmetic(self, client):
        assert client.post("/api/add", json={"a": "99999999999999999999", "b": "1"}).get_json()["result"] == "100000000000000000000"
        assert client.post("/api/subtract", json={"a": "100", "b": "1"}).get_json()["result"] == "99"
        assert client.post("/api/compare", json={"a": "7", "b": "7"}).get_json()["result"] == "EQUAL"
        body = client.post("/api/power_mod", json={"base": "4", "exponent": "13", "modulus": "497"}).get_json()
        assert body["result"] == "445"

    def test_negative_result(self, client):
        r = client.post("/api/subtract", json={"a": "5", "b": "10"})
        assert r.status_code == 400
        assert r.get_json()["error"] == "NegativeResult"

    def test_zero_modulus(self, client):
        r = client.post("/api/power_mod", json={"base": "4", "exponent": "13", "modulus": "0"})
        assert r.status_code == 400
        assert r.get_json()["error"] == "DivisionByZero"

    def test_next_prime(self, client):
        body = client.post("/api/next_prime", json={"n": "14"}).get_json()
        assert body["prime"] == "17"

class TestWebWitnessSource:
    def test_each_request_gets_its_own_generator(self, client, monkeypatch):
        import web.app as webapp
        from limbint import config
        seen = []
        real = webapp.miller_rabin

        def recording(n, k, rng=None):
            seen.append(rng)
            return real(n, k, rng)

        monkeypatch.setattr(webapp, "miller_rabin", recording)
        client.post("/api/prime", json={"n": "997", "k": 3})
        client.post("/api/prime", json={"n": "1105", "k": 3})
        assert len(seen) == 2
        assert seen[0] is not None and seen[1] is not None
        assert seen[0] is not seen[1]
        assert config.default_rng() not in (seen[0], seen[1])

    def test_next_prime_passes_generator(self, client, monkeypatch):
        import web.app as webapp
        seen = []
        real = webapp.next_probable_prime

        def recording(n, k, rng=None, **kw):
            seen.append(rng)
            return real(n, k, rng, **kw)

        monkeypatch.setattr(webapp, "next_probable_prime", recording)
        client.post("/api/next_prime", json={"n": "14"})
        assert seen and seen[0] is not None

class TestWebWorkLimit:
    @pytest.fixture(autouse=True)
    def small_cap(self, monkeypatch):
        from limbint import config
        monkeypatch.setattr(config, "MAX_WORK_DIGITS", 10)

    @pytest.mark.parametrize("path,body", [
        ("/api/prime", {"n": "1" * 11}),
        ("/api/next_prime", {"n": "1" * 11}),
        ("/api/power_mod", {"base": "2", "exponent": "1" * 11, "modulus": "97"}),
    ])
    def test_expensive_endpoints_capped(self, client, path, body):
        r = client.post(path, json=body)
        assert r.status_code == 400
        assert "longer than 10 digits" in r.get_json()["detail"]

    def test_cheap_endpoints_use_general_cap(self, client):
        r = client.post("/api/add", json={"a": "1" * 11, "b": "1"})
        assert r.status_code == 200
        assert r.get_json()["result"] == "1" * 10 + "2"
