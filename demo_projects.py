"""
Demo Projects Data for Task Manager Application
"""

DEMO_PROJECTS = [
    {
        "name": "Website Redesign",
        "description": "Complete website redesign project",
        "team_id": 1,  # Developers
        "status": "active",
        "deadline": "2024-12-31"
    },
    {
        "name": "Mobile App",
        "description": "New mobile application development",
        "team_id": 2,  # Designers
        "status": "active",
        "deadline": "2024-11-30"
    },
]
