"""
Scan Benchmark: View Tag Fast Path vs Full Check

A recipient scanning announcements pays one ECDH + one hash per entry.
Only when the view tag matches (about 1 in 256 for foreign payments) does
it pay for the point addition and address derivation as well.

This script scans a batch where a small share of payments belong to the
recipient and compares it to a batch where every tag matches.

Run:
    python examples/scan_benchmark.py
"""

import time

import numpy as np

from stealth_addr import (
    ScanStatus,
    classify_announcement,
    derive_stealth_keys,
    generate_stealth_address,
)


def scan(keys, announcements):
    return [
        classify_announcement(
            sa.stealth_address,
            sa.ephemeral_public_key,
            keys.spending_key.public_key,
            keys.viewing_key.private_key,
            sa.view_tag,
        )
        for sa in announcements
    ]


def compare_paths(batch_size=2000, own_ratio=0.05):
    print("=" * 70)
    print("Stealth-Addr: View Tag Fast Path vs Full Check")
    print("=" * 70)

    recipient = derive_stealth_keys("0x" + "31" * 32 + "32" * 32 + "1b")
    stranger = derive_stealth_keys("0x" + "41" * 32 + "42" * 32 + "1c")

    own = int(batch_size * own_ratio)
    mixed = [generate_stealth_address(recipient.meta_address) for _ in range(own)]
    mixed += [generate_stealth_address(stranger.meta_address) for _ in range(batch_size - own)]
    all_mine = [generate_stealth_address(recipient.meta_address) for _ in range(batch_size)]

    # Warmup
    scan(recipient, mixed[:50])

    print(f"\n[1] Mixed batch ({own}/{batch_size} own payments)")
    start = time.time()
    statuses = scan(recipient, mixed)
    time_mixed = time.time() - start
    counts = np.bincount(np.array(statuses, dtype=np.int64), minlength=len(ScanStatus))
    for status in ScanStatus:
        print(f"  {status.name:<18} {counts[status]:>6}")
    print(f"  Scan time:  {time_mixed*1000:.2f}ms ({batch_size / time_mixed:,.0f} ann/s)")

    print(f"\n[2] Every tag matches ({batch_size}/{batch_size} own payments)")
    start = time.time()
    statuses = scan(recipient, all_mine)
    time_full = time.time() - start
    print(f"  Matches:    {statuses.count(ScanStatus.MATCH)}")
    print(f"  Scan time:  {time_full*1000:.2f}ms ({batch_size / time_full:,.0f} ann/s)")

    print("\n" + "=" * 70)
    print(f"Fast path speedup: {time_full / time_mixed:.2f}×")
    print("=" * 70)

    return {
        "time_mixed": time_mixed,
        "time_full": time_full,
        "speedup": time_full / time_mixed,
    }


if __name__ == "__main__":
    compare_paths()
