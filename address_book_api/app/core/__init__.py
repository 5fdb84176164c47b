"""
Configuration, logging and database integration shared by the app.
"""
