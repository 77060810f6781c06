"""SkillSwap Pro: peer-to-peer skill exchange engine and its remote store."""

__version__ = "1.0.0"
