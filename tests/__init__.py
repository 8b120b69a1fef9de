"""
SWarp Test Suite

Structure:
- unit/: Unit tests for the catalog resolver, the game info API and the launcher
"""
