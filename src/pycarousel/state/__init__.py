"""State/store layer.

This package holds the per-widget carousel store: the state bag with
its ordered subscribers, and the master spinner tracker that reports
when every tracked resource has finished loading.
"""
