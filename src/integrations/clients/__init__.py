"""
Integration clients.

real_http/ holds the only code that talks to the analysis backend over HTTP.
"""
