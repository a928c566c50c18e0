from huffcodec.config import (
    Config,
    LOG_LEVELS,
    STRICT_DECODE,
    get_config,
)


def test_strict_decode_default():
    """Decoding is strict unless a caller opts out."""

    assert STRICT_DECODE is True
    assert Config.STRICT_DECODE is True


def test_config_singleton():
    """get_config should return the same singleton instance across calls."""

    c1 = get_config()
    c2 = get_config()
    assert c1 is c2
    assert isinstance(c1, Config)


def test_default_log_level_is_known():
    assert Config.DEFAULT_LOG_LEVEL in LOG_LEVELS


def test_codebook_file_defaults():
    assert Config.CODEBOOK_ENCODING == "utf-8"
    assert Config.CODE_SEPARATOR == "="
