# models/restaurant.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from models.menu import MenuItemIn, MenuItemOut

class RestaurantSignup(BaseModel):
    name: str = Field(min_length=1)
    password: str = Field(min_length=1)
    description: str
    location: str
    menu: List[MenuItemIn] = Field(default_factory=list)

class RestaurantLogin(BaseModel):
    name: str
    password: str

class RestaurantCreate(BaseModel):
    """Superuser-only creation. Without a password the restaurant cannot log in."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    name: str = Field(min_length=1)
    description: str
    location: str
    menu: List[MenuItemIn] = Field(default_factory=list)
    password: Optional[str] = None
    owner_id: Optional[str] = Field(None, alias="ownerId")

class RestaurantOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    owner_id: Optional[str] = Field(None, alias="ownerId")
    menu: List[MenuItemOut] = Field(default_factory=list)
