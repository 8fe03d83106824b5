"""Routing — ordered route table with first-match dispatch.

Routes are registered during setup and frozen when the router starts
dispatching.
"""
