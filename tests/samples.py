"""Sample Ultra API payloads shared by the tests."""

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
TAKER = "5ZWj7a1f8tWkjBESHKgrLmXshuXxqeY9SYcfbshpAqPG"

QUOTE_BODY = {
    "inputMint": SOL_MINT,
    "inAmount": "1000000000",
    "outputMint": USDC_MINT,
    "outAmount": "150250000",
    "otherAmountThreshold": "149498750",
    "swapMode": "ExactIn",
    "priceImpactPct": "0.015",
    "routePlan": [
        {
            "swapInfo": {
                "ammKey": "HcoJqG325TTifs6jyWvRJ9ET4pDu12Xrt2EQKZGFmuKX",
                "label": "Whirlpool",
                "inputMint": SOL_MINT,
                "outputMint": USDC_MINT,
                "inAmount": "1000000000",
                "outAmount": "150250000",
                "feeAmount": 5000,
                "feeMint": SOL_MINT,
            },
            "percent": 100,
        }
    ],
    "contextSlot": 312345678,
    "transaction": "AQAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA",
    "swapType": "ultra",
    "gasless": False,
    "requestId": "0194f1c2-8a1b-7c3d-9e4f-5a6b7c8d9e0f",
    "prioritizationFeeLamports": 5000,
    "feeBps": 10,
    "router": "metis",
}

ROUTERS_BODY = [
    {"id": "metis", "name": "Metis", "icon": "https://static.jup.ag/metis.svg"},
    {"id": "jupiterz", "name": "JupiterZ", "icon": "https://static.jup.ag/jupiterz.svg"},
    {"id": "hashflow", "name": "Hashflow", "icon": "https://static.jup.ag/hashflow.svg"},
    {"id": "dflow", "name": "DFlow", "icon": "https://static.jup.ag/dflow.svg"},
]
