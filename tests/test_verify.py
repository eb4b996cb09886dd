import pytest

from otpx import InvalidCounter, InvalidDigits, InvalidPeriod, InvalidToken, InvalidWindow, hotp, totp
from otpx.verify import verify_hotp, verify_totp

T = 1111111111 * 1000  # epoch ms, time step 37037037 at 30 s


def test_verify_hotp_exact(rfc_secret):
    result = verify_hotp(rfc_secret, "755224", 0)
    assert result.is_valid
    assert result.delta == 0
    assert result


def test_verify_hotp_look_ahead(rfc_secret):
    # "969429" is counter 3
    assert not verify_hotp(rfc_secret, "969429", 0)
    assert not verify_hotp(rfc_secret, "969429", 0, look_ahead=2)
    result = verify_hotp(rfc_secret, "969429", 0, look_ahead=3)
    assert result.is_valid and result.delta == 3


def test_verify_hotp_does_not_look_behind(rfc_secret):
    assert not verify_hotp(rfc_secret, "755224", 1, look_ahead=5)


def test_verify_hotp_stops_at_max_counter(rfc_secret):
    top = 2 ** 64 - 1
    code = hotp(rfc_secret, top)
    other = str((int(code) + 1) % 10 ** 6).zfill(6)
    assert verify_hotp(rfc_secret, code, top, look_ahead=3).delta == 0
    assert not verify_hotp(rfc_secret, other, top, look_ahead=3).is_valid


def test_verify_hotp_other_algorithm(rfc_secret):
    code = hotp(rfc_secret, 10, "SHA512", 8)
    assert verify_hotp(rfc_secret, code, 10, "SHA512", 8)
    assert not verify_hotp(rfc_secret, code, 10, "SHA1", 8)


@pytest.mark.parametrize("token", ["", "75522", "7552240", "75522a", "７５５２２４"])
def test_malformed_tokens_are_invalid(rfc_secret, hmac_spy, token):
    assert verify_hotp(rfc_secret, token, 0, look_ahead=10).is_valid is False
    assert hmac_spy == []


@pytest.mark.parametrize("token", [755224, None, b"755224"])
def test_non_string_token_raises(rfc_secret, token):
    with pytest.raises(InvalidToken):
        verify_hotp(rfc_secret, token, 0)


def test_verify_hotp_validates_parameters(rfc_secret, hmac_spy):
    with pytest.raises(InvalidWindow):
        verify_hotp(rfc_secret, "755224", 0, look_ahead=-1)
    with pytest.raises(InvalidCounter):
        verify_hotp(rfc_secret, "755224", -1)
    with pytest.raises(InvalidDigits):
        verify_hotp(rfc_secret, "755224", 0, digits=0)
    assert hmac_spy == []


def test_verify_totp_current_step(rfc_secret):
    code = totp(rfc_secret, timestamp=T)
    result = verify_totp(rfc_secret, code, timestamp=T)
    assert result.is_valid and result.delta == 0


def test_verify_totp_window(rfc_secret):
    previous = totp(rfc_secret, timestamp=T - 30000)
    nxt = totp(rfc_secret, timestamp=T + 30000)
    two_back = totp(rfc_secret, timestamp=T - 60000)

    assert verify_totp(rfc_secret, previous, timestamp=T).delta == -1
    assert verify_totp(rfc_secret, nxt, timestamp=T).delta == 1
    assert not verify_totp(rfc_secret, previous, timestamp=T, window=0)
    assert not verify_totp(rfc_secret, two_back, timestamp=T, window=1)
    assert verify_totp(rfc_secret, two_back, timestamp=T, window=2).delta == -2


def test_verify_totp_skips_negative_steps(rfc_secret):
    code = totp(rfc_secret, timestamp=0)
    result = verify_totp(rfc_secret, code, timestamp=0, window=3)
    assert result.is_valid and result.delta == 0


def test_verify_totp_rfc_vector():
    secret = b"12345678901234567890123456789012"
    assert verify_totp(secret, "46119246", "SHA256", 8, timestamp=59000)
    assert verify_totp(secret, "46119246", "SHA256", 8, timestamp=89000).delta == -1


def test_verify_totp_validates_parameters(rfc_secret, hmac_spy):
    with pytest.raises(InvalidWindow):
        verify_totp(rfc_secret, "123456", timestamp=T, window=-1)
    with pytest.raises(InvalidPeriod):
        verify_totp(rfc_secret, "123456", period=0, timestamp=T)
    with pytest.raises(InvalidToken):
        verify_totp(rfc_secret, 123456, timestamp=T)
    assert hmac_spy == []
