import os

from sql_config import Config, load_config


def test_defaults():
    cfg = load_config({})
    assert cfg.debounce_ms == 100
    assert cfg.debounce_seconds == 0.1
    assert (cfg.popover_width, cfg.popover_height) == (750, 600)
    assert cfg.copy_feedback_seconds == 2.0
    assert cfg.log_level == "INFO"
    assert cfg.hotkey_enabled is True
    assert os.path.isabs(cfg.log_file)


def test_overrides(tmp_path):
    cfg = load_config({
        "SQLWIDGET_DEBOUNCE_MS": "250",
        "SQLWIDGET_POPOVER_WIDTH": "900",
        "SQLWIDGET_COPY_FEEDBACK_SECONDS": "0.5",
        "SQLWIDGET_LOG_FILE": str(tmp_path / "w.log"),
        "SQLWIDGET_LOG_LEVEL": "debug",
        "SQLWIDGET_HOTKEY": "0",
    })
    assert cfg.debounce_seconds == 0.25
    assert cfg.popover_width == 900
    assert cfg.copy_feedback_seconds == 0.5
    assert cfg.log_file == str(tmp_path / "w.log")
    assert cfg.log_level == "DEBUG"
    assert cfg.hotkey_enabled is False


def test_bad_values_fall_back(caplog):
    cfg = load_config({
        "SQLWIDGET_DEBOUNCE_MS": "fast",
        "SQLWIDGET_POPOVER_HEIGHT": "-5",
        "SQLWIDGET_COPY_FEEDBACK_SECONDS": "soon",
        "SQLWIDGET_LOG_LEVEL": "chatty",
    })
    assert cfg.debounce_ms == Config().debounce_ms
    assert cfg.popover_height == 600
    assert cfg.copy_feedback_seconds == 2.0
    assert cfg.log_level == "INFO"
    assert "not an integer" in caplog.text


def test_reads_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("SQLWIDGET_DEBOUNCE_MS=42\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SQLWIDGET_DEBOUNCE_MS", raising=False)
    cfg = load_config()
    assert cfg.debounce_ms == 42
