import pytest

from otpgen import cli
from otpgen.config import SECRET_ENV_VAR, Config
from otpgen.exceptions import ConfigError

RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture(autouse=True)
def _no_env_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SECRET_ENV_VAR, raising=False)


def test_hotp_prints_code(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["-h", "-c", "1", "-s", RFC_SECRET]) == 0
    assert capsys.readouterr().out == "287082\n"


def test_totp_prints_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr("otpgen.cli.time.time", lambda: 59)
    assert cli.main(["-t", "-s", RFC_SECRET, "-d", "8"]) == 0
    assert capsys.readouterr().out == "94287082\n"


def test_secret_from_environment(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setenv(SECRET_ENV_VAR, RFC_SECRET)
    assert cli.main(["--hotp", "--counter", "9"]) == 0
    assert capsys.readouterr().out == "520489\n"


@pytest.mark.parametrize(
    "argv, message",
    [
        (["-s", RFC_SECRET], "Either -h or -t must be provided"),
        (["-t"], "A secret must be provided"),
        (["-t", "-s", RFC_SECRET, "-a", "md5"], "Argument of -a must be"),
        (["-h", "-s", RFC_SECRET], "Non-negative counter must be provided"),
        (["-t", "-s", RFC_SECRET, "-d", "0"], "Argument of -d must be positive"),
        (["-t", "-s", RFC_SECRET, "-p", "0"], "Argument of -p must be positive"),
        (["-h", "-c", "0", "-s", "1234"], "is not a Base32 character"),
        (["-h", "-c", "0", "-s", RFC_SECRET, "-d", "11"], "digits must be between 1 and 10"),
    ],
)
def test_errors_exit_with_usage(argv, message: str, capsys: pytest.CaptureFixture) -> None:
    assert cli.main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert message in captured.err
    assert cli.USAGE in captured.err


def test_non_integer_argument_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-h", "-c", "one", "-s", RFC_SECRET])
    assert excinfo.value.code == 2


def test_run_uses_injected_clock() -> None:
    config = Config(method="totp", secret=RFC_SECRET, digits=8).validate()
    assert cli.run(config, clock=lambda: 1111111109) == "07081804"


def test_run_hotp_ignores_clock() -> None:
    def clock() -> float:
        raise AssertionError("HOTP must not read the clock")

    config = Config(method="hotp", secret=RFC_SECRET, counter=0).validate()
    assert cli.run(config, clock=clock) == "755224"


def test_validate_returns_config() -> None:
    config = Config(method="totp", secret=RFC_SECRET, algorithm="SHA256")
    assert config.validate() is config


def test_validate_rejects_missing_method() -> None:
    with pytest.raises(ConfigError):
        Config(secret=RFC_SECRET).validate()


@pytest.mark.parametrize(
    "argv, expected",
    [(["-t", "-h", "-c", "0", "-s", RFC_SECRET], "755224\n"), (["-h", "-t", "-d", "8", "-s", RFC_SECRET], "94287082\n")],
)
def test_last_method_flag_wins(argv, expected: str, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    monkeypatch.setattr("otpgen.cli.time.time", lambda: 59)
    assert cli.main(argv) == 0
    assert capsys.readouterr().out == expected


def test_algorithm_name_is_case_insensitive(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["-h", "-c", "0", "-s", RFC_SECRET, "-a", "SHA1"]) == 0
    assert capsys.readouterr().out == "755224\n"
