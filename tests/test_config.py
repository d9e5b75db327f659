from fncoerce.config import DEFAULT_HOST
from fncoerce.config import DEFAULT_PORT
from fncoerce.config import FunctionConfig


def test_defaults():
    cfg = FunctionConfig.from_env({})
    assert cfg.listener is None
    assert cfg.socket_path is None
    assert cfg.host == DEFAULT_HOST
    assert cfg.port == DEFAULT_PORT
    assert cfg.strict_content_type is False
    assert cfg.json_logging is False


def test_from_env():
    cfg = FunctionConfig.from_env(
        {
            "FN_LISTENER": "unix:/tmp/iofs/lsnr.sock",
            "FN_PORT": "9000",
            "FN_STRICT_CONTENT_TYPE": "true",
            "FN_JSON_LOGGING": "1",
        }
    )
    assert cfg.socket_path == "/tmp/iofs/lsnr.sock"
    assert cfg.port == 9000
    assert cfg.strict_content_type is True
    assert cfg.json_logging is True


def test_non_unix_listener_has_no_socket_path():
    cfg = FunctionConfig(listener="tcp:0.0.0.0:8080")
    assert cfg.socket_path is None


def test_flags_are_false_unless_truthy():
    cfg = FunctionConfig.from_env({"FN_STRICT_CONTENT_TYPE": "no"})
    assert cfg.strict_content_type is False
