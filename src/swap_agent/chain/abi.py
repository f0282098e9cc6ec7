# src/swap_agent/chain/abi.py
"""ABI fragments for the delegated agent contract."""

TRADE_DATA_COMPONENTS = [
    {"name": "tokenOut", "type": "address"},
    {"name": "amountIn", "type": "uint256"},
    {"name": "minAmountOut", "type": "uint256"},
    {"name": "deadline", "type": "uint256"},
    {"name": "nonce", "type": "uint256"},
]

AGENT_ABI = [
    {
        "type": "function",
        "name": "executeSwap",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "data", "type": "tuple", "components": TRADE_DATA_COMPONENTS},
            {"name": "signature", "type": "bytes"},
        ],
        "outputs": [],
    },
    {
        "type": "function",
        "name": "getPausedState",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "getUserFunds",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "type": "function",
        "name": "getAuthorizedSigner",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
]
