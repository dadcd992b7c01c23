from drillrunner.ui import success, use_emoji, warn


def test_use_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert use_emoji() is True
    monkeypatch.setenv("NO_EMOJI", "1")
    assert use_emoji() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran exercises/a.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/a.rs with errors\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("broken")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.rstrip("\n").endswith("broken")


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran exercises/a.rs")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/a.rs\n"


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("fine")
    out = capsys.readouterr().out
    assert out.startswith("✅ ")
    assert "fine" in out