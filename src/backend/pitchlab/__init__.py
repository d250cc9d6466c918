"""Pitchlab - AI-assisted evaluation of project pitches."""
