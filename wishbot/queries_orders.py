"""Queries on orders and products, and the full set of the bot's queries."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .models import DimOrderStatus, Order, Product, ShopAdmin
from .queries_social import SocialQueries
from .queries_wishes import WishQueries

_CREATE_ORDER = """
INSERT INTO orders (
    price,
    status,
    customer_id,
    customer_login,
    consignee_id,
    product_id,
    admin_id,
    shop_id
) VALUES (
    :price, :status, :customer_id, :customer_login, :consignee_id, :product_id, :admin_id, :shop_id
) RETURNING id, price, status, customer_id, customer_login, consignee_id, product_id, admin_id, shop_id, created_at, updated_at
"""

_GET_DIM_ORDER_STATUS_BY_ID = """
SELECT id, status_code, status_name FROM dim_order_status
WHERE id = :id LIMIT 1
"""

_GET_ORDER = """
SELECT id, price, status, customer_id, customer_login, consignee_id, product_id, admin_id, shop_id, created_at, updated_at FROM orders
WHERE id = :id LIMIT 1
"""

_GET_ORDERS_BY_CUSTOMER = """
SELECT id, price, status, customer_id, customer_login, consignee_id, product_id, admin_id, shop_id, created_at, updated_at FROM orders
WHERE customer_id = :customer_id
"""

_GET_RANDOM_ADMIN_BY_SHOP_ID = """
SELECT admin_id, shop_id FROM shop_admins
WHERE shop_id = :shop_id
ORDER BY random()
LIMIT 1
"""

_UPDATE_ORDER_STATUS = """
UPDATE orders
SET
status = :status,
updated_at = now()
WHERE customer_id = :customer_id AND id = :id
"""

_GET_PRODUCT_BY_ID = """
SELECT id, name, price, description, image, category_id, status, shop_id, admin_id, created_at, updated_at FROM product
WHERE id = :id
"""

_GET_PRODUCTS_BY_CATEGORY = """
SELECT
    p.name AS name,
    p.id AS id,
    p.price AS price,
    p.description AS description,
    p.status AS status,
    p.image AS image,
    p.category_id AS category_id,
    p.created_at AS created_at,
    p.updated_at AS updated_at,
    p.shop_id AS shop_id,
    p.admin_id AS admin_id,
    s.status_name AS status_name
FROM product p
LEFT JOIN dim_product_status s ON p.status = s.id
WHERE p.category_id = :category_id
"""


@dataclass(frozen=True)
class CategoryProduct:
    """A product of a category together with the name of its status, if known."""

    name: str
    id: uuid.UUID
    price: float
    description: str
    status: int
    image: str
    category_id: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    shop_id: uuid.UUID
    admin_id: int
    status_name: Optional[str]


class Queries(SocialQueries, WishQueries):
    """Every statement the wish bot runs: users, friends, wishes, orders and products."""

    def _order(self, row) -> Order:
        return Order(
            id=self._uuid(row["id"]),
            price=float(row["price"]),
            status=int(row["status"]),
            customer_id=int(row["customer_id"]),
            customer_login=row["customer_login"],
            consignee_id=int(row["consignee_id"]),
            product_id=self._uuid(row["product_id"]),
            admin_id=int(row["admin_id"]),
            shop_id=self._uuid(row["shop_id"]),
            created_at=self._timestamp(row["created_at"]),
            updated_at=self._timestamp(row["updated_at"]),
        )

    def _shop_admin(self, row) -> ShopAdmin:
        return ShopAdmin(admin_id=int(row["admin_id"]), shop_id=self._uuid(row["shop_id"]))

    def create_order(
        self,
        price: float,
        status: int,
        customer_id: int,
        customer_login: str,
        consignee_id: int,
        product_id: uuid.UUID,
        admin_id: int,
        shop_id: uuid.UUID,
    ) -> Order:
        """Place an order for a product on behalf of a customer."""
        return self._order(
            self._fetch_one(
                _CREATE_ORDER,
                price=price,
                status=status,
                customer_id=customer_id,
                customer_login=customer_login,
                consignee_id=consignee_id,
                product_id=product_id,
                admin_id=admin_id,
                shop_id=shop_id,
            )
        )

    def get_dim_order_status_by_id(self, status_id: int) -> DimOrderStatus:
        """The order status with the given id."""
        row = self._fetch_one(_GET_DIM_ORDER_STATUS_BY_ID, id=status_id)
        return DimOrderStatus(
            id=int(row["id"]), status_code=row["status_code"], status_name=row["status_name"]
        )

    def get_order(self, order_id: uuid.UUID) -> Order:
        """The order with the given id."""
        return self._order(self._fetch_one(_GET_ORDER, id=order_id))

    def get_orders_by_customer(self, customer_id: int) -> list[Order]:
        """All orders placed by the customer."""
        return [
            self._order(row)
            for row in self._fetch_all(_GET_ORDERS_BY_CUSTOMER, customer_id=customer_id)
        ]

    def get_random_admin_by_shop_id(self, shop_id: uuid.UUID) -> ShopAdmin:
        """One of the shop's administrators, picked at random."""
        return self._shop_admin(self._fetch_one(_GET_RANDOM_ADMIN_BY_SHOP_ID, shop_id=shop_id))

    def update_order_status(self, order_id: uuid.UUID, customer_id: int, status: int) -> None:
        """Set the status of one of the customer's orders."""
        self._execute(_UPDATE_ORDER_STATUS, id=order_id, customer_id=customer_id, status=status)

    def get_product_by_id(self, product_id: uuid.UUID) -> Product:
        """The product with the given id."""
        row = self._fetch_one(_GET_PRODUCT_BY_ID, id=product_id)
        return Product(
            id=self._uuid(row["id"]),
            name=row["name"],
            price=float(row["price"]),
            description=row["description"],
            image=row["image"],
            category_id=int(row["category_id"]),
            status=int(row["status"]),
            shop_id=self._uuid(row["shop_id"]),
            admin_id=int(row["admin_id"]),
            created_at=self._timestamp(row["created_at"]),
            updated_at=self._timestamp(row["updated_at"]),
        )

    def get_products_by_category(self, category_id: int) -> list[CategoryProduct]:
        """All products of a category with their status names."""
        return [
            CategoryProduct(
                name=row["name"],
                id=self._uuid(row["id"]),
                price=float(row["price"]),
                description=row["description"],
                status=int(row["status"]),
                image=row["image"],
                category_id=int(row["category_id"]),
                created_at=self._timestamp(row["created_at"]),
                updated_at=self._timestamp(row["updated_at"]),
                shop_id=self._uuid(row["shop_id"]),
                admin_id=int(row["admin_id"]),
                status_name=row["status_name"],
            )
            for row in self._fetch_all(_GET_PRODUCTS_BY_CATEGORY, category_id=category_id)
        ]