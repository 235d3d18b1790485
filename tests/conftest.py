"""Shared pytest fixtures for bindspec tests."""

from pathlib import Path

import pytest

SAMPLE_BINDINGS = """\
// Sample bindings used across tests
class cocos2d::CCNode {
    virtual void setScale(float scale) = win 0x1a0, mac 0x3f00;
    float m_scale;
}

class PlayLayer : GJBaseGameLayer, CCCircleWaveDelegate {
    static PlayLayer* create(GJGameLevel* level) = win 0x1fb6d0, android inline;
    bool init(GJGameLevel* level) = win 0x1fb780, imac 0x7f9f0, m1 0x6c2d0 {
        if (level) { m_level = level; }
        return true;
    }
    PlayerObject* m_player1;
    bool m_isPracticeMode;
}
"""


@pytest.fixture
def sample_bindings() -> str:
    """Return a two-class binding source."""
    return SAMPLE_BINDINGS


@pytest.fixture
def bindings_file(tmp_path: Path, sample_bindings: str) -> Path:
    """Write the sample bindings to a file and return its path."""
    path = tmp_path / "GeometryDash.bind"
    path.write_text(sample_bindings, encoding="utf-8")
    return path
