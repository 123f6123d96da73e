from app.models.user import User
from app.models.category import Category
from app.models.event import Event
