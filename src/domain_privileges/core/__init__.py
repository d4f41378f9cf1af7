"""Core building blocks shared by all domain-privileges features."""
