"""
Sample resources used by the test suite.
"""
