"""
activitygen: Android activity scaffolding.

Generates an activity class and layout from templates and merges the entries
they rely on into the project's shared resource files and manifest, without
overwriting anything that already exists.
"""

__version__ = "1.0.0"
