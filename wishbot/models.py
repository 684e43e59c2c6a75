"""Rows of the wish bot's database tables."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class DimFriendStatus:
    id: int
    status_name: str


@dataclass(frozen=True)
class DimOrderStatus:
    id: int
    status_code: str
    status_name: str


@dataclass(frozen=True)
class DimProductCategory:
    id: int
    category_code: str
    category_name: str


@dataclass(frozen=True)
class DimProductStatus:
    id: int
    status_code: str
    status_name: str


@dataclass(frozen=True)
class DimWishStatus:
    id: int
    status_name: str


@dataclass(frozen=True)
class Friend:
    chat_id: int
    friend_id: int
    status: int
    created_at: datetime


@dataclass(frozen=True)
class Order:
    id: uuid.UUID
    price: float
    status: int
    customer_id: int
    customer_login: str
    consignee_id: int
    product_id: uuid.UUID
    admin_id: int
    shop_id: uuid.UUID
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class Product:
    id: uuid.UUID
    name: str
    price: float
    description: str
    image: str
    category_id: int
    status: int
    shop_id: uuid.UUID
    admin_id: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class Shop:
    id: uuid.UUID
    name: str
    description: Optional[str]
    image: str
    token: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class ShopAdmin:
    admin_id: int
    shop_id: uuid.UUID


@dataclass(frozen=True)
class User:
    username: str
    chat_id: int
    created_at: datetime


@dataclass(frozen=True)
class UserInfo:
    chat_id: int
    address: str
    phone: str
    name: str
    description: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]


@dataclass(frozen=True)
class Wish:
    id: int
    chat_id: int
    created_at: datetime
    product_id: uuid.UUID
    status: int