# tests/test_tokenizer.py
from unittest.mock import MagicMock, patch

import tiktoken

from lsa.utils import tokenizer
from lsa.utils.tokenizer import count_tokens

# captured at import, before the autouse fixture swaps in an offline stub
REAL_GET_ENCODING = tokenizer.get_encoding


def test_count_falls_back_to_chars_over_four(capsys):
    assert count_tokens("x" * 40) == 10
    assert "[Warning]" in capsys.readouterr().err


def test_count_uses_encoding(monkeypatch):
    encoding = MagicMock()
    encoding.encode.return_value = [1, 2, 3]
    monkeypatch.setattr(tokenizer, "get_encoding", lambda: encoding)

    assert count_tokens("<|endoftext|> is plain text here") == 3
    encoding.encode.assert_called_once_with("<|endoftext|> is plain text here", disallowed_special=())


def test_encoding_is_loaded_once():
    REAL_GET_ENCODING.cache_clear()
    try:
        with patch.object(tiktoken, "get_encoding", return_value="enc") as mock_get:
            assert REAL_GET_ENCODING() == "enc"
            assert REAL_GET_ENCODING() == "enc"
        mock_get.assert_called_once_with("cl100k_base")
    finally:
        REAL_GET_ENCODING.cache_clear()


def test_encoding_falls_back_to_p50k():
    REAL_GET_ENCODING.cache_clear()
    try:
        with patch.object(tiktoken, "get_encoding", side_effect=[ValueError("missing"), "p50k"]) as mock_get:
            assert REAL_GET_ENCODING() == "p50k"
        assert [c.args[0] for c in mock_get.call_args_list] == ["cl100k_base", "p50k_base"]
    finally:
        REAL_GET_ENCODING.cache_clear()
