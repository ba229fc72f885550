"""SocialDash API: post scheduling, lifecycle and analytics for a social media dashboard."""

__version__ = "1.0.0"
