"""Test configuration shared by all suites."""

import hypothesis

# First torch calls in a process are slow; deadlines would flake.
hypothesis.settings.register_profile("intpoly", deadline=None)
hypothesis.settings.load_profile("intpoly")
