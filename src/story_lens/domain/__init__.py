"""Ports between the story workflow and its persistence backends."""

from story_lens.domain.ports import StoryBlobStore

__all__ = ["StoryBlobStore"]
