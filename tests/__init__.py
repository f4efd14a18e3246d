"""
Tests for the webinar management backend

Tests are organized by functionality:
- test_change_seats.py: ChangeSeats use case against the in-memory repository
- test_in_memory_webinar_repository.py / test_webinar_repository.py: repository contract
- test_webinars_api.py: HTTP endpoints and error mapping
- test_cli.py: manage_webinars command line tool
"""
