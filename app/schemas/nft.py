"""Response schema for NFT records (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict, Field

from app.models.nft import NFT


class NFTRead(BaseModel):
    """Serialized NFT as returned by every catalog endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    item_title: str = Field(..., alias="itemTitle")
    description: str
    price: float
    royalties: float
    picture: str
    creator: int = Field(..., description="Id of the user who created the NFT")

    @classmethod
    def from_model(cls, nft: NFT) -> "NFTRead":
        return cls(
            id=nft.id,
            item_title=nft.item_title,
            description=nft.description,
            price=nft.price,
            royalties=nft.royalties,
            picture=nft.picture,
            creator=nft.creator_id,
        )
