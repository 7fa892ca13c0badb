"""Facade over monerod's RPC interface."""

from typing import Any, Dict, List, Optional, Sequence

from .base import BaseRPC, compact, require
from .candidates import DAEMON_LOCAL_PORTS
from .config import Endpoint, load_known_endpoints
from .errors import ValidationError


class DaemonRPC(BaseRPC):
    default_port = 18081
    local_ports = DAEMON_LOCAL_PORTS
    liveness_method = "get_block_count"

    def known_endpoints(self) -> Sequence[Endpoint]:
        return load_known_endpoints()

    # JSON-RPC methods

    def get_block_count(self) -> Any:
        """Number of blocks in the longest chain, e.g. ``{"count": 993163, "status": "OK"}``."""
        return self.call("get_block_count")

    def on_get_block_hash(self, height: int) -> Any:
        require(height=height)
        return self.call("on_get_block_hash", [height])

    def get_block_template(self, wallet_address: str, reserve_size: int) -> Any:
        require(wallet_address=wallet_address, reserve_size=reserve_size)
        return self.call("get_block_template", {"wallet_address": wallet_address, "reserve_size": reserve_size})

    def submit_block(self, blobs: Sequence[str]) -> Any:
        """Submit mined block blobs to the network."""
        require(blobs=blobs)
        return self.call("submit_block", list(blobs))

    def get_last_block_header(self) -> Any:
        return self.call("get_last_block_header")

    def get_block_header_by_hash(self, hash: str) -> Any:
        require(hash=hash)
        return self.call("get_block_header_by_hash", {"hash": hash})

    def get_block_header_by_height(self, height: int) -> Any:
        require(height=height)
        return self.call("get_block_header_by_height", {"height": height})

    def get_block_headers_range(self, start_height: int, end_height: int) -> Any:
        require(start_height=start_height, end_height=end_height)
        return self.call("get_block_headers_range", {"start_height": start_height, "end_height": end_height})

    def get_block(self, height: Optional[int] = None, hash: Optional[str] = None) -> Any:
        """Full block by height or by hash; exactly one must be given."""
        if (height is None) == (hash is None):
            raise ValidationError("exactly one of height or hash required")
        return self.call("get_block", compact(height=height, hash=hash))

    def get_connections(self) -> Any:
        return self.call("get_connections")

    def get_info(self) -> Any:
        return self.call("get_info")

    def hard_fork_info(self) -> Any:
        return self.call("hard_fork_info")

    def set_bans(self, bans: List[Dict[str, Any]]) -> Any:
        """Ban or unban peers.

        Each entry is ``{"host": ..., "ban": bool, "seconds": int}`` or uses
        ``ip`` (integer form) instead of ``host``.
        """
        require(bans=bans)
        return self.call("set_bans", {"bans": bans})

    def get_bans(self) -> Any:
        return self.call("get_bans")

    def flush_txpool(self, txids: Optional[Sequence[str]] = None) -> Any:
        params = {"txids": list(txids)} if txids is not None else None
        return self.call("flush_txpool", params)

    def get_output_histogram(
        self,
        amounts: Sequence[int],
        min_count: int = 0,
        max_count: int = 0,
        unlocked: bool = False,
        recent_cutoff: int = 0,
    ) -> Any:
        require(amounts=amounts)
        return self.call(
            "get_output_histogram",
            {
                "amounts": list(amounts),
                "min_count": min_count,
                "max_count": max_count,
                "unlocked": unlocked,
                "recent_cutoff": recent_cutoff,
            },
        )

    def get_version(self) -> Any:
        return self.call("get_version")

    def get_coinbase_tx_sum(self, height: int, count: int) -> Any:
        require(height=height, count=count)
        return self.call("get_coinbase_tx_sum", {"height": height, "count": count})

    def get_fee_estimate(self, grace_blocks: Optional[int] = None) -> Any:
        params = {"grace_blocks": grace_blocks} if grace_blocks is not None else None
        return self.call("get_fee_estimate", params)

    def get_alternate_chains(self) -> Any:
        return self.call("get_alternate_chains")

    def relay_tx(self, txids: Sequence[str]) -> Any:
        require(txids=txids)
        return self.call("relay_tx", {"txids": list(txids)})

    def sync_info(self) -> Any:
        return self.call("sync_info")

    def get_txpool_backlog(self) -> Any:
        return self.call("get_txpool_backlog")

    def get_output_distribution(
        self,
        amounts: Sequence[int],
        cumulative: bool = False,
        from_height: int = 0,
        to_height: int = 0,
    ) -> Any:
        require(amounts=amounts)
        return self.call(
            "get_output_distribution",
            {"amounts": list(amounts), "cumulative": cumulative, "from_height": from_height, "to_height": to_height},
        )

    # Extension endpoints: raw JSON posted to /<method>

    def get_height(self) -> Any:
        return self.call_extension("get_height")

    def get_transactions(self, txs_hashes: Sequence[str], decode_as_json: bool = False, prune: bool = False) -> Any:
        require(txs_hashes=txs_hashes)
        return self.call_extension(
            "get_transactions",
            {"txs_hashes": list(txs_hashes), "decode_as_json": decode_as_json, "prune": prune},
        )

    def get_alt_blocks_hashes(self) -> Any:
        return self.call_extension("get_alt_blocks_hashes")

    def is_key_image_spent(self, key_images: Sequence[str]) -> Any:
        require(key_images=key_images)
        return self.call_extension("is_key_image_spent", {"key_images": list(key_images)})

    def send_raw_transaction(self, tx_as_hex: str, do_not_relay: bool = False) -> Any:
        require(tx_as_hex=tx_as_hex)
        return self.call_extension("send_raw_transaction", {"tx_as_hex": tx_as_hex, "do_not_relay": do_not_relay})

    def start_mining(
        self,
        miner_address: str,
        threads_count: int = 1,
        do_background_mining: bool = False,
        ignore_battery: bool = False,
    ) -> Any:
        require(miner_address=miner_address)
        return self.call_extension(
            "start_mining",
            {
                "miner_address": miner_address,
                "threads_count": threads_count,
                "do_background_mining": do_background_mining,
                "ignore_battery": ignore_battery,
            },
        )

    def stop_mining(self) -> Any:
        return self.call_extension("stop_mining")

    def mining_status(self) -> Any:
        return self.call_extension("mining_status")

    def save_bc(self) -> Any:
        return self.call_extension("save_bc")

    def get_peer_list(self) -> Any:
        return self.call_extension("get_peer_list")

    def set_log_hash_rate(self, visible: bool) -> Any:
        require(visible=visible)
        return self.call_extension("set_log_hash_rate", {"visible": visible})

    def set_log_level(self, level: int) -> Any:
        require(level=level)
        return self.call_extension("set_log_level", {"level": level})

    def set_log_categories(self, categories: Optional[str] = None) -> Any:
        return self.call_extension("set_log_categories", compact(categories=categories))

    def get_transaction_pool(self) -> Any:
        return self.call_extension("get_transaction_pool")

    def get_transaction_pool_hashes(self) -> Any:
        return self.call_extension("get_transaction_pool_hashes")

    def get_transaction_pool_stats(self) -> Any:
        return self.call_extension("get_transaction_pool_stats")

    def stop_daemon(self) -> Any:
        return self.call_extension("stop_daemon")

    def get_limit(self) -> Any:
        return self.call_extension("get_limit")

    def set_limit(self, limit_down: int = -1, limit_up: int = -1) -> Any:
        """Bandwidth limits in kB/s; -1 resets to default, 0 leaves unchanged."""
        return self.call_extension("set_limit", {"limit_down": limit_down, "limit_up": limit_up})

    def out_peers(self, out_peers: int) -> Any:
        require(out_peers=out_peers)
        return self.call_extension("out_peers", {"out_peers": out_peers})

    def in_peers(self, in_peers: int) -> Any:
        require(in_peers=in_peers)
        return self.call_extension("in_peers", {"in_peers": in_peers})

    def get_outs(self, outputs: List[Dict[str, int]], get_txid: bool = True) -> Any:
        require(outputs=outputs)
        return self.call_extension("get_outs", {"outputs": outputs, "get_txid": get_txid})

    def update(self, command: str, path: Optional[str] = None) -> Any:
        """Check for (``command="check"``) or download (``"download"``) an update."""
        require(command=command)
        return self.call_extension("update", compact(command=command, path=path))
