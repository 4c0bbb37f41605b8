from sqlalchemy import Column, Integer, String

from tripdesk.models.base import Base

class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Not unique: signup does not reject a taken username
    username = Column(String, nullable=False, index=True)
    password = Column(String, nullable=False)
    full_name = Column(String)
    email = Column(String)
    phone_number = Column(String)
