"""
Claimkit Test Suite

Structure:
- unit/: Fast, isolated unit tests
"""
