"""
Library modules that implement the individual stages of the b64d pipeline, together with the
shared infrastructure for configuration, logging, and error handling.
"""
