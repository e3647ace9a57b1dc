"""User model."""
from sqlalchemy import Column, Integer, String
from signup_api.db.base import Base


class User(Base):
    """Registered user. ``password`` only ever holds a bcrypt hash."""
    
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(32), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<User {self.username}>"
