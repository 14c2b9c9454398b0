"""
Service layer: LLM access, advice, market and weather data.
"""
