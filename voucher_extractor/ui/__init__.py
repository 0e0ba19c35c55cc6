"""Streamlit review surface."""
