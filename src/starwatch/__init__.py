"""starwatch - tracks a person's GitHub stars and blog posts with AI commentary."""

__version__ = "0.1.0"
