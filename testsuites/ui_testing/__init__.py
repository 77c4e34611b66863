"""
XYZ Bank UI automation: framework, page objects, test data and scenarios.
"""
