"""EIP-2930 access lists."""

from typing import Any, ClassVar, List

from ethereum_codec_base_types import Address, CamelModel, Hash, RLPSerializable

from .decoding import decode_address, decode_hashes, decode_list, expect_item_count


class AccessList(CamelModel, RLPSerializable):
    """Access List entry: an address and the storage keys it pre-warms."""

    address: Address
    storage_keys: List[Hash]

    rlp_fields: ClassVar[List[str]] = ["address", "storage_keys"]

    @classmethod
    def from_rlp_list(cls, items: Any, name: str = "accessList") -> List["AccessList"]:
        """Build the access list entries from their decoded RLP items."""
        entries = []
        for index, item in enumerate(decode_list(items, name)):
            entry_name = f"{name}[{index}]"
            entry = decode_list(item, entry_name)
            expect_item_count(entry, (2,), entry_name)
            entries.append(
                cls(
                    address=decode_address(entry[0], f"{entry_name}.address"),
                    storage_keys=decode_hashes(entry[1], f"{entry_name}.storageKeys"),
                )
            )
        return entries
