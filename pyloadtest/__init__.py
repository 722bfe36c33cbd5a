"""
HTTP load testing: parallel GET requests and latency statistics
"""
