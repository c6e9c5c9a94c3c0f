"""Streamlit catalog viewer package."""
