# src/xpboard/config.py

"""Runtime settings read from the environment."""

import os

# Base URL of the friends API serving the ranked leaderboard, e.g.
# "https://api.example.com/api". No default: the service refuses to guess.
FRIENDS_API_URL = os.getenv("FRIENDS_API_URL")

# Path of the leaderboard resource below FRIENDS_API_URL
FRIENDS_LEADERBOARD_PATH = os.getenv("FRIENDS_LEADERBOARD_PATH", "/friends/leaderboard")

# Per-request timeout for the upstream fetch, in seconds
FRIENDS_API_TIMEOUT = float(os.getenv("FRIENDS_API_TIMEOUT", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
