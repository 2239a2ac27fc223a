"""Reviews app: ratings and messages users leave on listings."""
