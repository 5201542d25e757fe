"""
Schema and seed tooling. Not used while serving requests.
"""
