"""Enquiries app: booking requests from users and listing requests from owners."""
