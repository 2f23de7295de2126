"""
Catalog and member profile stores

Build the read-only snapshots the engine works on. Both should be read from
the same session so purchase exclusion and availability reflect one state.
"""

from typing import AbstractSet, FrozenSet, Iterable, Optional

from sqlalchemy.orm import Session, selectinload

from ..config import settings
from ..models import Game, Member, WebOrder, OrderItem
from ..schemas.catalog import (
    CatalogItem,
    CatalogSnapshot,
    Edition,
    OrderStatus,
    PreferenceProfile,
)
from ..utils.logging import get_logger

logger = get_logger(__name__)


class MemberNotFoundError(LookupError):
    """Raised when a member id does not exist"""

    def __init__(self, member_id: int):
        super().__init__(f"Member {member_id} not found")
        self.member_id = member_id


def to_catalog_item(game: Game, position: int) -> CatalogItem:
    """Project a Game row onto the engine's item type"""
    return CatalogItem(
        id=game.id,
        name=game.name,
        tags=frozenset(tag.name for tag in game.tags),
        editions=tuple(
            Edition(platform=product.platform_code, availability=product.availability_status)
            for product in game.game_products
        ),
        position=position
    )


def purchased_game_ids(
    orders: Iterable[WebOrder],
    excluded_statuses: AbstractSet[OrderStatus] = frozenset()
) -> FrozenSet[int]:
    """
    Games with at least one edition on any line item of any order

    Order status is ignored unless it is listed in excluded_statuses.
    """
    return frozenset(
        order_item.product.game_id
        for order in orders
        if order.status not in excluded_statuses
        for order_item in order.order_items
    )


class CatalogStore:
    """Reads the game catalog"""

    def __init__(self, db: Session):
        self.db = db

    def get_snapshot(self) -> CatalogSnapshot:
        """All games in catalog order (ascending id)"""

        games = (
            self.db.query(Game)
            .options(selectinload(Game.tags), selectinload(Game.game_products))
            .order_by(Game.id)
            .all()
        )

        return CatalogSnapshot(
            items=tuple(to_catalog_item(game, position) for position, game in enumerate(games))
        )


class MemberProfileStore:
    """Reads member favorites and order history"""

    def __init__(self, db: Session, exclude_cancelled_orders: Optional[bool] = None):
        self.db = db
        if exclude_cancelled_orders is None:
            exclude_cancelled_orders = settings.EXCLUDE_CANCELLED_ORDERS
        self.exclude_cancelled_orders = exclude_cancelled_orders

    def get_profile(self, member_id: int) -> PreferenceProfile:
        """
        Build a member's preference profile

        Raises:
            MemberNotFoundError: If no member has this id
        """

        member = (
            self.db.query(Member)
            .options(
                selectinload(Member.favorite_tags),
                selectinload(Member.favorite_platforms),
                selectinload(Member.web_orders)
                .selectinload(WebOrder.order_items)
                .selectinload(OrderItem.product)
            )
            .filter(Member.id == member_id)
            .first()
        )

        if member is None:
            raise MemberNotFoundError(member_id)

        excluded_statuses = {OrderStatus.CANCELLED} if self.exclude_cancelled_orders else set()
        purchased = purchased_game_ids(member.web_orders, excluded_statuses)

        logger.debug(
            "Loaded preference profile",
            member_id=member_id,
            favorite_tags=len(member.favorite_tags),
            favorite_platforms=len(member.favorite_platforms),
            purchased=len(purchased)
        )

        return PreferenceProfile(
            member_id=member.id,
            favorite_tags=frozenset(tag.name for tag in member.favorite_tags),
            favorite_platforms=frozenset(platform.platform_code for platform in member.favorite_platforms),
            purchased_ids=purchased
        )
