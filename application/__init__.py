"""
Application Layer for the Fitness Tracker API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
"""
