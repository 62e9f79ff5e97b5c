"""Streamlit dashboard and the upload processing behind it."""
