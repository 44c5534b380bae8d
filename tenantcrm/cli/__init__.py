"""
Command-line front end for the CRM API.
"""
