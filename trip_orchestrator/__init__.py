"""Top-level package for the trip orchestrator.

Turns a natural-language trip query into a personalized answer: the
place name and intent are extracted, the place is geocoded, the weather,
places, events, transport, rental and helpline providers are queried
concurrently, and the results are filtered for the traveller and laid
out as a day-by-day itinerary.

Typical use goes through the DI container:

    from trip_orchestrator.container import get_container
    from trip_orchestrator.services import TourismOrchestrator

    orchestrator = get_container().resolve(TourismOrchestrator)
    response = orchestrator.process("I'm going to Paris, let's plan my trip",
                                    visit_date="2025-06-01")
"""
