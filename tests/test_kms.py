import pytest

from toolkit.kms import (
    DecryptRequest,
    DecryptResponse,
    EncryptRequest,
    EncryptResponse,
    Resource,
)


@pytest.mark.parametrize(
    "request_, message",
    [
        (EncryptRequest(), "key was empty"),
        (EncryptRequest(resource=Resource(data=b"x")), "key was empty"),
        (EncryptRequest(key="k1"), "nothing to encrypt"),
        (DecryptRequest(), "key was empty"),
        (DecryptRequest(resource=Resource(url="file:///tmp/a")), "key was empty"),
        (DecryptRequest(key="k1"), "nothing to decrypt"),
    ],
)
def test_validate_errors(request_, message):
    with pytest.raises(ValueError, match=message):
        request_.validate()


def test_valid_encrypt_request():
    request = EncryptRequest(key="k1", resource=Resource(data=b"abc"), target_url="file:///tmp/out")
    assert request.validate() is None
    assert request.resource.data == b"abc"
    assert request.target_url == "file:///tmp/out"


def test_valid_decrypt_request():
    request = DecryptRequest(key="k1", resource=Resource(parameter="param"))
    assert request.validate() is None
    assert request.resource.parameter == "param"


def test_defaults():
    assert Resource() == Resource(url="", parameter="", data=b"")
    assert EncryptResponse() == EncryptResponse(encrypted_data=b"", encrypted_text="")
    assert DecryptResponse() == DecryptResponse(data=b"", text="")


def test_responses_hold_values():
    response = DecryptResponse(data=b"abc", text="abc")
    assert response.data.decode() == response.text