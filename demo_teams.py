"""
Demo Teams Data for Task Manager Application
Creates the development and design teams with their members
"""

# Demo Teams Data
# Structure: Team Name, Description, Creator ID, Member IDs
DEMO_TEAMS = [
    {
        "name": "Developers",
        "description": "Main development team",
        "created_by": 1,  # admin
        "member_ids": [1, 2]  # admin, user1
    },
    {
        "name": "Designers",
        "description": "UI/UX team",
        "created_by": 1,  # admin
        "member_ids": [1]
    },
]
