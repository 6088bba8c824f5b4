"""
Application layer for the Athlete Monitor API.

- ports/: repository interfaces the services depend on
- exceptions.py: errors shared by the application and infrastructure layers
"""
