"""Shared constants: explorer endpoints and user-facing messages."""

# chain_id -> (getsourcecode endpoint, settings attribute holding the API key)
EXPLORER_ENDPOINTS = {
        1: ("https://api.etherscan.io/api", "etherscan_api_key"),                  # Eth Mainnet
        5: ("https://api-goerli.etherscan.io/api", "etherscan_api_key"),           # Goerli Testnet
        137: ("https://api.polygonscan.com/api", "polygonscan_api_key"),           # Polygon Mainnet
        59140: ("https://explorer.goerli.linea.build/api", None),                  # Linea Testnet
        80001: ("https://api-testnet.polygonscan.com/api", "polygonscan_api_key"), # Mumbai Testnet
}

NOT_VERIFIED_WARNING = (
    "【WARNING】 The safety of the function you are trying to execute cannot be "
    "confirmed because it has not verified."
)

NOT_DECODED_WARNING = (
    "【WARNING】 The safety of the function you are trying to execute cannot be "
    "confirmed because the function could not be decoded."
)

GENERIC_ERROR = "An Error Occurred"

SUMMARY_INSTRUCTION = "Please tell me what the above smart contract executes."

DEFAULT_GPT_ENDPOINT = "https://api.openai.com"
DEFAULT_GPT_MODEL = "gpt-3.5-turbo"
DEFAULT_LENS_API_URL = "https://api.lens.dev"
DEFAULT_INSIGHT_API_BASE_URL = "https://eth-tokyo-social-security-snap-app.vercel.app/api"
VERIFICATION_URL = "https://eth-tokyo-social-security-snap-app.vercel.app"
