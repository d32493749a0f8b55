import pytest

from dicephrase import backend


def test_randombytes():
    data = backend.randombytes(32)
    assert isinstance(data, bytes)
    assert len(data) == 32
    assert data != backend.randombytes(32)


def test_backend_preference():
    assert backend.backend_name_of('randombytes') in ('pynacl', 'standard')


def test_missing_surrogate(monkeypatch):
    monkeypatch.setattr(backend, 'available_backends', ())
    randombytes = backend.randombytes
    assert isinstance(randombytes, backend.MissingSurrogate)
    with pytest.raises(backend.MissingError,
                       match="Missing randombytes. Please install pynacl or standard."):
        randombytes(8)
