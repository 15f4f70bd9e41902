"""
Demo Users Data for Task Manager Application
Creates a manager and an employee, plus a few calendar events for them
"""

# Demo Users Data
# Positions map to database IDs 1..n when seeded into an empty database
DEMO_USERS = [
    {
        "username": "admin",
        "email": "admin@example.com",
        "password": "admin123",
        "role": "manager"
    },
    {
        "username": "user1",
        "email": "user1@example.com",
        "password": "password123",
        "role": "employee"
    },
]

# Calendar events, keyed by the owner's position in DEMO_USERS (1-based)
DEMO_EVENTS = [
    {
        "user_id": 1,
        "title": "Team meeting",
        "description": "Kick-off discussion for the new project",
        "event_date": "2024-04-10",
        "event_time": "14:00:00",
        "color": "#9A48EA"
    },
    {
        "user_id": 1,
        "title": "Lunch with a client",
        "description": "Restaurant \"Vesna\"",
        "event_date": "2024-04-12",
        "event_time": "13:00:00",
        "color": "#59b25c"
    },
    {
        "user_id": 2,
        "title": "Product presentation",
        "description": "For investors",
        "event_date": "2024-04-15",
        "event_time": "10:30:00",
        "color": "#1b8df7"
    },
]
