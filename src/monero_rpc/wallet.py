"""Facade over monero-wallet-rpc.

Every method maps its arguments onto one JSON-RPC call. Methods that
change address, account, label or note state are followed by a
best-effort ``store`` so the wallet file reflects the change; see
:func:`monero_rpc.base.persist`.
"""

from typing import Any, Dict, List, Optional, Sequence

from .base import BaseRPC, compact, persist, require
from .candidates import WALLET_LOCAL_PORTS
from .errors import ValidationError
from .units import Amount, xmr_to_atomic

TRANSFER_CATEGORIES = ("in", "out", "pending", "failed", "pool")
KEY_TYPES = ("view_key", "spend_key", "mnemonic")


class WalletRPC(BaseRPC):
    default_port = 18082
    local_ports = WALLET_LOCAL_PORTS
    liveness_method = "get_version"

    # Balances, accounts and addresses

    def get_balance(self, account_index: int = 0, address_indices: Optional[Sequence[int]] = None) -> Any:
        """Balance of an account, e.g. ``{"balance": 140000000000, "unlocked_balance": 50000000000}``."""
        params: Dict[str, Any] = {"account_index": account_index}
        if address_indices is not None:
            params["address_indices"] = list(address_indices)
        return self.call("get_balance", params)

    def get_address(self, account_index: int = 0, address_index: Optional[Sequence[int]] = None) -> Any:
        params: Dict[str, Any] = {"account_index": account_index}
        if address_index is not None:
            params["address_index"] = list(address_index)
        return self.call("get_address", params)

    def get_address_index(self, address: str) -> Any:
        require(address=address)
        return self.call("get_address_index", {"address": address})

    def create_address(self, account_index: int = 0, label: Optional[str] = None) -> Any:
        result = self.call("create_address", compact(account_index=account_index, label=label))
        return persist(self, result)

    def label_address(self, major: int, minor: int, label: str) -> Any:
        require(major=major, minor=minor, label=label)
        result = self.call("label_address", {"index": {"major": major, "minor": minor}, "label": label})
        return persist(self, result)

    def validate_address(self, address: str, any_net_type: bool = False, allow_openalias: bool = False) -> Any:
        require(address=address)
        return self.call(
            "validate_address",
            {"address": address, "any_net_type": any_net_type, "allow_openalias": allow_openalias},
        )

    def get_accounts(self, tag: Optional[str] = None) -> Any:
        return self.call("get_accounts", compact(tag=tag) or None)

    def create_account(self, label: Optional[str] = None) -> Any:
        result = self.call("create_account", compact(label=label) or None)
        return persist(self, result)

    def label_account(self, account_index: int, label: str) -> Any:
        require(account_index=account_index, label=label)
        result = self.call("label_account", {"account_index": account_index, "label": label})
        return persist(self, result)

    def get_account_tags(self) -> Any:
        return self.call("get_account_tags")

    def tag_accounts(self, tag: str, accounts: Sequence[int]) -> Any:
        require(tag=tag, accounts=accounts)
        result = self.call("tag_accounts", {"tag": tag, "accounts": list(accounts)})
        return persist(self, result)

    def untag_accounts(self, accounts: Sequence[int]) -> Any:
        require(accounts=accounts)
        result = self.call("untag_accounts", {"accounts": list(accounts)})
        return persist(self, result)

    def set_account_tag_description(self, tag: str, description: str) -> Any:
        require(tag=tag, description=description)
        result = self.call("set_account_tag_description", {"tag": tag, "description": description})
        return persist(self, result)

    def get_height(self) -> Any:
        return self.call("get_height")

    # Transfers

    def transfer(
        self,
        destinations: List[Dict[str, Any]],
        account_index: int = 0,
        subaddr_indices: Optional[Sequence[int]] = None,
        priority: int = 0,
        ring_size: Optional[int] = None,
        unlock_time: int = 0,
        get_tx_key: bool = True,
        do_not_relay: bool = False,
        get_tx_hex: bool = False,
        get_tx_metadata: bool = False,
    ) -> Any:
        """Send to one or more ``{"address": ..., "amount": <atomic units>}`` destinations."""
        require(destinations=destinations)
        params = {
            "destinations": destinations,
            "account_index": account_index,
            "priority": priority,
            "unlock_time": unlock_time,
            "get_tx_key": get_tx_key,
            "do_not_relay": do_not_relay,
            "get_tx_hex": get_tx_hex,
            "get_tx_metadata": get_tx_metadata,
        }
        params.update(compact(ring_size=ring_size))
        if subaddr_indices is not None:
            params["subaddr_indices"] = list(subaddr_indices)
        return self.call("transfer", params)

    def transfer_split(
        self,
        destinations: List[Dict[str, Any]],
        account_index: int = 0,
        subaddr_indices: Optional[Sequence[int]] = None,
        priority: int = 0,
        ring_size: Optional[int] = None,
        unlock_time: int = 0,
        get_tx_keys: bool = True,
        do_not_relay: bool = False,
        get_tx_hex: bool = False,
        get_tx_metadata: bool = False,
    ) -> Any:
        require(destinations=destinations)
        params = {
            "destinations": destinations,
            "account_index": account_index,
            "priority": priority,
            "unlock_time": unlock_time,
            "get_tx_keys": get_tx_keys,
            "do_not_relay": do_not_relay,
            "get_tx_hex": get_tx_hex,
            "get_tx_metadata": get_tx_metadata,
        }
        params.update(compact(ring_size=ring_size))
        if subaddr_indices is not None:
            params["subaddr_indices"] = list(subaddr_indices)
        return self.call("transfer_split", params)

    def sign_transfer(self, unsigned_txset: str, export_raw: bool = False) -> Any:
        require(unsigned_txset=unsigned_txset)
        return self.call("sign_transfer", {"unsigned_txset": unsigned_txset, "export_raw": export_raw})

    def submit_transfer(self, tx_data_hex: str) -> Any:
        require(tx_data_hex=tx_data_hex)
        return self.call("submit_transfer", {"tx_data_hex": tx_data_hex})

    def sweep_dust(self, get_tx_keys: bool = True, do_not_relay: bool = False) -> Any:
        return self.call("sweep_dust", {"get_tx_keys": get_tx_keys, "do_not_relay": do_not_relay})

    def sweep_all(
        self,
        address: str,
        account_index: int = 0,
        subaddr_indices: Optional[Sequence[int]] = None,
        priority: int = 0,
        ring_size: Optional[int] = None,
        unlock_time: int = 0,
        get_tx_keys: bool = True,
        below_amount: Optional[int] = None,
        do_not_relay: bool = False,
    ) -> Any:
        require(address=address)
        params = {
            "address": address,
            "account_index": account_index,
            "priority": priority,
            "unlock_time": unlock_time,
            "get_tx_keys": get_tx_keys,
            "do_not_relay": do_not_relay,
        }
        params.update(compact(ring_size=ring_size, below_amount=below_amount))
        if subaddr_indices is not None:
            params["subaddr_indices"] = list(subaddr_indices)
        return self.call("sweep_all", params)

    def sweep_single(
        self,
        address: str,
        key_image: str,
        priority: int = 0,
        ring_size: Optional[int] = None,
        unlock_time: int = 0,
        get_tx_key: bool = True,
        do_not_relay: bool = False,
    ) -> Any:
        require(address=address, key_image=key_image)
        params = {
            "address": address,
            "key_image": key_image,
            "priority": priority,
            "unlock_time": unlock_time,
            "get_tx_key": get_tx_key,
            "do_not_relay": do_not_relay,
        }
        params.update(compact(ring_size=ring_size))
        return self.call("sweep_single", params)

    def relay_tx(self, hex: str) -> Any:
        require(hex=hex)
        return self.call("relay_tx", {"hex": hex})

    def store(self) -> Any:
        return self.call("store")

    def get_payments(self, payment_id: str) -> Any:
        require(payment_id=payment_id)
        return self.call("get_payments", {"payment_id": payment_id})

    def get_bulk_payments(self, payment_ids: Sequence[str], min_block_height: int = 0) -> Any:
        require(payment_ids=payment_ids)
        return self.call("get_bulk_payments", {"payment_ids": list(payment_ids), "min_block_height": min_block_height})

    def incoming_transfers(
        self,
        transfer_type: str = "all",
        account_index: int = 0,
        subaddr_indices: Optional[Sequence[int]] = None,
    ) -> Any:
        """``transfer_type`` is ``all``, ``available`` or ``unavailable`` (already spent)."""
        params: Dict[str, Any] = {"transfer_type": transfer_type, "account_index": account_index}
        if subaddr_indices is not None:
            params["subaddr_indices"] = list(subaddr_indices)
        return self.call("incoming_transfers", params)

    # Keys

    def query_key(self, key_type: str) -> Any:
        require(key_type=key_type)
        if key_type not in KEY_TYPES:
            raise ValidationError(f"key_type must be one of {KEY_TYPES}")
        return self.call("query_key", {"key_type": key_type})

    def view_key(self) -> Any:
        return self.query_key("view_key")

    def spend_key(self) -> Any:
        return self.query_key("spend_key")

    def mnemonic(self) -> Any:
        return self.query_key("mnemonic")

    def make_integrated_address(self, standard_address: Optional[str] = None, payment_id: Optional[str] = None) -> Any:
        return self.call("make_integrated_address", compact(standard_address=standard_address, payment_id=payment_id))

    def split_integrated_address(self, integrated_address: str) -> Any:
        require(integrated_address=integrated_address)
        return self.call("split_integrated_address", {"integrated_address": integrated_address})

    def stop_wallet(self) -> Any:
        return self.call("stop_wallet")

    def rescan_blockchain(self) -> Any:
        return self.call("rescan_blockchain")

    # Notes and attributes

    def set_tx_notes(self, txids: Sequence[str], notes: Sequence[str]) -> Any:
        require(txids=txids, notes=notes)
        result = self.call("set_tx_notes", {"txids": list(txids), "notes": list(notes)})
        return persist(self, result)

    def get_tx_notes(self, txids: Sequence[str]) -> Any:
        require(txids=txids)
        return self.call("get_tx_notes", {"txids": list(txids)})

    def set_attribute(self, key: str, value: str) -> Any:
        require(key=key, value=value)
        result = self.call("set_attribute", {"key": key, "value": value})
        return persist(self, result)

    def get_attribute(self, key: str) -> Any:
        require(key=key)
        return self.call("get_attribute", {"key": key})

    # Proofs

    def get_tx_key(self, txid: str) -> Any:
        require(txid=txid)
        return self.call("get_tx_key", {"txid": txid})

    def check_tx_key(self, txid: str, tx_key: str, address: str) -> Any:
        require(txid=txid, tx_key=tx_key, address=address)
        return self.call("check_tx_key", {"txid": txid, "tx_key": tx_key, "address": address})

    def get_tx_proof(self, txid: str, address: str, message: Optional[str] = None) -> Any:
        require(txid=txid, address=address)
        return self.call("get_tx_proof", compact(txid=txid, address=address, message=message))

    def check_tx_proof(self, txid: str, address: str, signature: str, message: Optional[str] = None) -> Any:
        require(txid=txid, address=address, signature=signature)
        return self.call("check_tx_proof", compact(txid=txid, address=address, signature=signature, message=message))

    def get_spend_proof(self, txid: str, message: Optional[str] = None) -> Any:
        require(txid=txid)
        return self.call("get_spend_proof", compact(txid=txid, message=message))

    def check_spend_proof(self, txid: str, signature: str, message: Optional[str] = None) -> Any:
        require(txid=txid, signature=signature)
        return self.call("check_spend_proof", compact(txid=txid, signature=signature, message=message))

    def get_reserve_proof(
        self,
        all: bool = True,
        account_index: Optional[int] = None,
        amount: Optional[int] = None,
        message: Optional[str] = None,
    ) -> Any:
        """Prove the full balance (``all``) or ``amount`` of ``account_index``."""
        if not all:
            require(account_index=account_index, amount=amount)
        return self.call(
            "get_reserve_proof",
            compact(all=all, account_index=account_index, amount=amount, message=message),
        )

    def check_reserve_proof(self, address: str, signature: str, message: Optional[str] = None) -> Any:
        require(address=address, signature=signature)
        return self.call("check_reserve_proof", compact(address=address, signature=signature, message=message))

    # Transfer history

    def get_transfers(
        self,
        categories: Sequence[str] = TRANSFER_CATEGORIES,
        account_index: int = 0,
        subaddr_indices: Optional[Sequence[int]] = None,
        min_height: Optional[int] = None,
        max_height: Optional[int] = None,
    ) -> Any:
        """Look up transfers; ``categories`` is a subset of ``in, out, pending, failed, pool``."""
        if isinstance(categories, str):
            categories = (categories,)
        params: Dict[str, Any] = {category: True for category in categories}
        params["account_index"] = account_index
        if subaddr_indices is not None:
            params["subaddr_indices"] = list(subaddr_indices)
        if min_height is not None or max_height is not None:
            params["filter_by_height"] = True
            params.update(compact(min_height=min_height, max_height=max_height))
        return self.call("get_transfers", params)

    def get_transfer_by_txid(self, txid: str, account_index: Optional[int] = None) -> Any:
        require(txid=txid)
        return self.call("get_transfer_by_txid", compact(txid=txid, account_index=account_index))

    # Signing

    def sign(self, data: str) -> Any:
        require(data=data)
        return self.call("sign", {"data": data})

    def verify(self, data: str, address: str, signature: str) -> Any:
        require(data=data, address=address, signature=signature)
        return self.call("verify", {"data": data, "address": address, "signature": signature})

    # Outputs and key images

    def export_outputs(self, all: bool = False) -> Any:
        return self.call("export_outputs", {"all": all})

    def import_outputs(self, outputs_data_hex: str) -> Any:
        require(outputs_data_hex=outputs_data_hex)
        return self.call("import_outputs", {"outputs_data_hex": outputs_data_hex})

    def export_key_images(self, all: bool = False) -> Any:
        return self.call("export_key_images", {"all": all})

    def import_key_images(self, signed_key_images: List[Dict[str, str]], offset: Optional[int] = None) -> Any:
        require(signed_key_images=signed_key_images)
        return self.call("import_key_images", compact(signed_key_images=signed_key_images, offset=offset))

    # URIs

    def make_uri(
        self,
        address: str,
        amount: Amount,
        payment_id: Optional[str] = None,
        recipient_name: Optional[str] = None,
        tx_description: Optional[str] = None,
    ) -> Any:
        """Build a ``monero:`` payment URI. ``amount`` is given in XMR."""
        require(address=address, amount=amount)
        params = compact(
            address=address,
            amount=xmr_to_atomic(amount),
            payment_id=payment_id,
            recipient_name=recipient_name,
            tx_description=tx_description,
        )
        return self.call("make_uri", params)

    def parse_uri(self, uri: str) -> Any:
        require(uri=uri)
        return self.call("parse_uri", {"uri": uri})

    # Address book

    def get_address_book(self, entries: Sequence[int]) -> Any:
        require(entries=entries)
        return self.call("get_address_book", {"entries": list(entries)})

    def add_address_book(self, address: str, payment_id: Optional[str] = None, description: Optional[str] = None) -> Any:
        require(address=address)
        result = self.call("add_address_book", compact(address=address, payment_id=payment_id, description=description))
        return persist(self, result)

    def edit_address_book(
        self,
        index: int,
        address: Optional[str] = None,
        payment_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Any:
        require(index=index)
        params: Dict[str, Any] = {"index": index}
        for field, value in (("address", address), ("payment_id", payment_id), ("description", description)):
            params[f"set_{field}"] = value is not None
            if value is not None:
                params[field] = value
        result = self.call("edit_address_book", params)
        return persist(self, result)

    def delete_address_book(self, index: int) -> Any:
        require(index=index)
        result = self.call("delete_address_book", {"index": index})
        return persist(self, result)

    # Sync and mining

    def refresh(self, start_height: Optional[int] = None) -> Any:
        return self.call("refresh", compact(start_height=start_height) or None)

    def auto_refresh(self, enable: bool = True, period: Optional[int] = None) -> Any:
        return self.call("auto_refresh", compact(enable=enable, period=period))

    def rescan_spent(self) -> Any:
        return self.call("rescan_spent")

    def start_mining(self, threads_count: int, do_background_mining: bool = False, ignore_battery: bool = False) -> Any:
        require(threads_count=threads_count)
        return self.call(
            "start_mining",
            {
                "threads_count": threads_count,
                "do_background_mining": do_background_mining,
                "ignore_battery": ignore_battery,
            },
        )

    def stop_mining(self) -> Any:
        return self.call("stop_mining")

    # Wallet files

    def get_languages(self) -> Any:
        return self.call("get_languages")

    def create_wallet(self, filename: str, password: str = "", language: str = "English") -> Any:
        require(filename=filename)
        return self.call("create_wallet", {"filename": filename, "password": password, "language": language})

    def open_wallet(self, filename: str, password: str = "") -> Any:
        require(filename=filename)
        return self.call("open_wallet", {"filename": filename, "password": password})

    def close_wallet(self) -> Any:
        return self.call("close_wallet")

    def restore_deterministic_wallet(
        self,
        filename: str,
        seed: str,
        password: str = "",
        restore_height: int = 0,
        language: str = "English",
        seed_offset: str = "",
        autosave_current: bool = True,
    ) -> Any:
        require(filename=filename, seed=seed)
        return self.call(
            "restore_deterministic_wallet",
            {
                "filename": filename,
                "seed": seed,
                "password": password,
                "restore_height": restore_height,
                "language": language,
                "seed_offset": seed_offset,
                "autosave_current": autosave_current,
            },
        )

    def generate_from_keys(
        self,
        filename: str,
        address: str,
        viewkey: str,
        spendkey: Optional[str] = None,
        password: str = "",
        restore_height: int = 0,
        autosave_current: bool = True,
    ) -> Any:
        """Restore from keys; leave out ``spendkey`` for a view-only wallet."""
        require(filename=filename, address=address, viewkey=viewkey)
        params = {
            "filename": filename,
            "address": address,
            "viewkey": viewkey,
            "password": password,
            "restore_height": restore_height,
            "autosave_current": autosave_current,
        }
        params.update(compact(spendkey=spendkey))
        return self.call("generate_from_keys", params)

    def change_wallet_password(self, old_password: str = "", new_password: str = "") -> Any:
        return self.call("change_wallet_password", {"old_password": old_password, "new_password": new_password})

    # Multisig

    def is_multisig(self) -> Any:
        return self.call("is_multisig")

    def prepare_multisig(self) -> Any:
        return self.call("prepare_multisig")

    def make_multisig(self, multisig_info: Sequence[str], threshold: int, password: str = "") -> Any:
        require(multisig_info=multisig_info, threshold=threshold)
        return self.call(
            "make_multisig",
            {"multisig_info": list(multisig_info), "threshold": threshold, "password": password},
        )

    def export_multisig_info(self) -> Any:
        return self.call("export_multisig_info")

    def import_multisig_info(self, info: Sequence[str]) -> Any:
        require(info=info)
        return self.call("import_multisig_info", {"info": list(info)})

    def finalize_multisig(self, multisig_info: Sequence[str], password: str = "") -> Any:
        require(multisig_info=multisig_info)
        return self.call("finalize_multisig", {"multisig_info": list(multisig_info), "password": password})

    def sign_multisig(self, tx_data_hex: str) -> Any:
        require(tx_data_hex=tx_data_hex)
        return self.call("sign_multisig", {"tx_data_hex": tx_data_hex})

    def submit_multisig(self, tx_data_hex: str) -> Any:
        require(tx_data_hex=tx_data_hex)
        return self.call("submit_multisig", {"tx_data_hex": tx_data_hex})

    def get_version(self) -> Any:
        return self.call("get_version")
