"""draftroom - timed snake-draft orchestration for fantasy baseball leagues."""

__version__ = "0.1.0"
