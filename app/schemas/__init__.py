from .common import CreatedId, MessageOut, ValidationErrorOut
from .user import UserCreate, UserLogin, UserUpdate, UserOut, UserBasic, UserProfile, ProfileOut, ProfileUpdate, PasswordChange
from .tokens import Token
from .settings import UserSettingsOut, UserSettingsUpdate
from .team import TeamCreate, TeamUpdate, TeamOut, TeamMessage
from .project import ProjectCreate, ProjectUpdate, ProjectOut, ProjectMessage
from .tag import TagCreate, TagUpdate, TagOut, TagMessage
from .task_status import TaskStatusCreate, TaskStatusUpdate, TaskStatusOut
from .task import TaskCreate, TaskUpdate, TaskOut, TaskListItem, TaskDetail, TaskMessage, TaskTagAssign
from .event import EventCreate, EventUpdate, EventOut
