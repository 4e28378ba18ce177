from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class MenuItemIn(BaseModel):
    """
    A menu entry as sent by clients. `_id` is optional; items without one
    get a fresh ObjectId when the menu is stored.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id")
    food_item: Optional[str] = Field(None, alias="foodItem")
    price: Optional[float] = None
    type: Optional[str] = None
    item_image: Optional[str] = Field(None, alias="itemImage")

class MenuItemOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    food_item: Optional[str] = Field(None, alias="foodItem")
    price: Optional[float] = None
    type: Optional[str] = None
    item_image: Optional[str] = Field(None, alias="itemImage")

# `role` is accepted for compatibility with existing clients but not used
class MenuUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    role: Optional[str] = None
    menu: List[MenuItemIn] = Field(default_factory=list)

class MenuItemDeleteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    role: Optional[str] = None
