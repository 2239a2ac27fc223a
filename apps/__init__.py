"""Domain apps of the Horoo marketplace API."""
