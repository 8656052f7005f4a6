"""End-to-end tests.

Purpose
- Drive the top-level ``querylab`` command the way a user would and check
  what reaches the terminal and the flight-recorder file.
"""
