from .user import User, UserSettings
from .team import Team, team_members
from .project import Project
from .task import Task, TaskStatus, task_tags
from .tag import Tag
from .event import Event
