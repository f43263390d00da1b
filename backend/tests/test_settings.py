from app.core.config import Settings


def test_cors_origins_accept_comma_and_json(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
    assert Settings(_env_file=None).CORS_ORIGINS == ["https://a.example", "https://b.example"]

    monkeypatch.setenv("CORS_ORIGINS", '["https://c.example"]')
    assert Settings(_env_file=None).CORS_ORIGINS == ["https://c.example"]


def test_cors_allow_all(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ALL", "true")
    assert Settings(_env_file=None).CORS_ORIGINS == ["*"]


def test_delivery_flags(monkeypatch):
    monkeypatch.setenv("SMTP_HOST", "  smtp.example.com ")
    monkeypatch.delenv("TWILIO_ACCOUNT_SID", raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.SMTP_HOST == "smtp.example.com"
    assert cfg.smtp_configured is True
    assert cfg.sms_configured is False
