"""HTTP helpers shared by every API app."""
