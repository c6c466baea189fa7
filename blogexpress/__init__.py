"""BlogExpress: blog publishing and SocialSync dashboard API."""

__version__ = "1.0.0"
