"""moodcheck command line interface."""
