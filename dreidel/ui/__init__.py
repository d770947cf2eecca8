"""Streamlit front end for Dreidel."""
