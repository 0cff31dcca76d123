"""Core services for the TalentScope scouting platform."""

__version__ = "0.1.0"
