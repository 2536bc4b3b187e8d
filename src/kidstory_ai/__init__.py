"""KidStory AI - personalized illustrated children's stories."""

__version__ = "0.1.0"
