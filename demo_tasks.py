"""
Demo Tasks Data for Task Manager Application
Task statuses and tags are seeded first since tasks reference them
"""

DEMO_TASK_STATUSES = ["To Do", "In Progress", "Done"]

DEMO_TAGS = [
    {"name": "Frontend", "color": "#3498db"},
    {"name": "Backend", "color": "#2ecc71"},
    {"name": "Bug", "color": "#e74c3c"},
    {"name": "Feature", "color": "#9b59b6"},
]

DEMO_TASKS = [
    {
        "title": "Design homepage",
        "description": "Create new homepage layout",
        "project_id": 1,  # Website Redesign
        "status_id": 1,  # To Do
        "creator_id": 1,  # admin
        "priority": "high",
        "due_date": "2024-10-15",
        "tag_ids": [1, 4]  # Frontend, Feature
    },
    {
        "title": "API development",
        "description": "Develop backend API endpoints",
        "project_id": 2,  # Mobile App
        "status_id": 2,  # In Progress
        "creator_id": 2,  # user1
        "priority": "medium",
        "due_date": "2024-09-30",
        "tag_ids": [2, 4]  # Backend, Feature
    },
]
