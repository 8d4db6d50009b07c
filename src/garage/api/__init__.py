"""Serializable shapes handed to the UI and print layers."""
