"""Unit tests for app.services.catalog and app.services.auth against an in-memory database."""

import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import NFT, Base, User
from app.services import catalog
from app.services.auth import authenticate_user, register_user
from app.services.errors import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
)


class CatalogTestCase(unittest.TestCase):
    def setUp(self) -> None:
        engine = create_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(engine)
        self.db = sessionmaker(bind=engine)()
        self.alice = register_user(self.db, "alice", "a@x.com", "secret1")
        self.bob = register_user(self.db, "bob", "b@x.com", "secret1")
        self.nft = catalog.create_nft(
            self.db,
            creator_id=self.alice.id,
            item_title="Art1",
            description="d",
            price=10,
            royalties=5,
            picture="art1.jpg",
        )

    def tearDown(self) -> None:
        self.db.close()


class TestRegisterUser(CatalogTestCase):
    """register_user / authenticate_user."""

    def test_duplicate_email(self) -> None:
        with self.assertRaises(AlreadyExistsError):
            register_user(self.db, "alice again", "a@x.com", "x")

    def test_authenticate(self) -> None:
        self.assertEqual(authenticate_user(self.db, "a@x.com", "secret1").id, self.alice.id)
        with self.assertRaises(AuthenticationError):
            authenticate_user(self.db, "a@x.com", "wrong")
        with self.assertRaises(AuthenticationError):
            authenticate_user(self.db, "nobody@x.com", "secret1")


class TestListing(CatalogTestCase):
    def test_list_by_creator(self) -> None:
        catalog.create_nft(self.db, self.bob.id, "B1", "d", 1, 1, "b1.jpg")
        self.assertEqual(len(catalog.list_nfts(self.db)), 2)
        mine = catalog.list_nfts_by_creator(self.db, self.alice.id)
        self.assertEqual([n.id for n in mine], [self.nft.id])

    def test_get_missing(self) -> None:
        with self.assertRaises(NotFoundError):
            catalog.get_nft(self.db, 9999)


class TestUpdateNFT(CatalogTestCase):
    """update_nft partial semantics and ownership."""

    def test_only_truthy_fields_change(self) -> None:
        changes = catalog.NFTChanges(item_title="", price=0, royalties=7)
        nft = catalog.update_nft(self.db, self.alice.id, self.nft.id, changes)
        self.assertEqual(nft.item_title, "Art1")
        self.assertEqual(nft.price, 10)
        self.assertEqual(nft.royalties, 7)
        self.assertEqual(nft.picture, "art1.jpg")
        self.assertEqual(nft.creator_id, self.alice.id)

    def test_admin_role_does_not_bypass_update_check(self) -> None:
        self.bob.role = "admin"
        self.db.commit()
        with self.assertRaises(AuthorizationError):
            catalog.update_nft(self.db, self.bob.id, self.nft.id, catalog.NFTChanges(price=1))

    def test_unknown_caller_denied(self) -> None:
        with self.assertRaises(AuthorizationError):
            catalog.check_can_update(self.db, 9999, self.nft.id)


class TestDeleteNFT(CatalogTestCase):
    """delete_nft ownership and role rules."""

    def test_non_owner_denied(self) -> None:
        with self.assertRaises(AuthorizationError):
            catalog.delete_nft(self.db, self.bob.id, self.nft.id)

    def test_admin_allowed(self) -> None:
        self.bob.role = "admin"
        self.db.commit()
        deleted = catalog.delete_nft(self.db, self.bob.id, self.nft.id)
        self.assertEqual(deleted.item_title, "Art1")
        self.assertEqual(self.db.query(NFT).count(), 0)

    def test_null_role_is_not_admin(self) -> None:
        self.bob.role = None
        self.db.commit()
        self.assertFalse(self.db.get(User, self.bob.id).is_admin)
        with self.assertRaises(AuthorizationError):
            catalog.delete_nft(self.db, self.bob.id, self.nft.id)

    def test_deleted_caller_denied_even_as_creator(self) -> None:
        with self.assertRaises(AuthorizationError):
            catalog.delete_nft(self.db, 9999, self.nft.id)
