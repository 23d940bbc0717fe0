"""Natural language processing components for the trip orchestrator.

This subpackage groups the deterministic pieces of query understanding:
place-name extraction, intent classification, the curated city table and
the LLM prompt shared by the model-backed parsers.
"""
