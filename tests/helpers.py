"""Canned Yahoo Finance payloads and test doubles."""
import json


class FakeFetch:
    """Fetch collaborator returning canned bodies and recording requested URLs."""

    def __init__(self, body):
        self.body = body
        self.urls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.urls.append(url)
        if isinstance(self.body, str):
            return self.body
        return json.dumps(self.body)


class RecordingHook:
    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    @property
    def names(self) -> list[str]:
        return [e.name for e in self.events]


CHART_PAYLOAD = {
    "chart": {
        "result": [
            {
                "meta": {
                    "currency": "USD",
                    "symbol": "AAPL",
                    "exchangeName": "NMS",
                    "instrumentType": "EQUITY",
                    "regularMarketTime": 1700000000,
                    "timezone": "EST",
                    "exchangeTimezoneName": "America/New_York",
                    "regularMarketPrice": 105,
                    "previousClose": 100,
                    "currentTradingPeriod": {
                        "pre": {"start": 1699952400, "end": 1699972200},
                        "regular": {"start": 1699972200, "end": 1699995600},
                    },
                },
                "timestamp": [1699972200, 1699972500, 1699972800],
                "indicators": {
                    "quote": [
                        {
                            "open": [100.5, 101.0, None],
                            "high": [101.5, 102.0, 104.0],
                            "low": [100.0, 100.5, 102.5],
                            "close": [101.0, 102.0, 103.5],
                            "volume": [1200, 800, 950],
                        }
                    ]
                },
            }
        ],
        "error": None,
    }
}

PRICE_PAYLOAD = {
    "quoteSummary": {
        "result": [
            {
                "price": {
                    "symbol": "AAPL",
                    "currency": "USD",
                    "shortName": "Apple Inc.",
                    "longName": "Apple Inc.",
                    "quoteType": "EQUITY",
                    "exchange": "NMS",
                    "exchangeName": "NasdaqGS",
                    "priceHint": {"raw": 2, "fmt": "2"},
                    "regularMarketPrice": {"raw": 189.7, "fmt": "189.70"},
                    "regularMarketDayHigh": {"raw": 190.96, "fmt": "190.96"},
                    "regularMarketDayLow": {"raw": 188.65, "fmt": "188.65"},
                    "regularMarketOpen": {"raw": 189.57, "fmt": "189.57"},
                    "regularMarketPreviousClose": {"raw": 189.69, "fmt": "189.69"},
                    "regularMarketChange": {"raw": 0.01, "fmt": "0.01"},
                    "regularMarketChangePercent": {"raw": 0.0000527, "fmt": "0.01%"},
                    "regularMarketVolume": {"raw": 24048344, "fmt": "24.05M"},
                    "marketCap": {"raw": 2950000000000, "fmt": "2.95T"},
                    "regularMarketTime": 1700000000,
                }
            }
        ],
        "error": None,
    }
}

COMPANY_PROFILE_PAYLOAD = {
    "quoteSummary": {
        "result": [
            {
                "summaryProfile": {
                    "address1": "1 Main St",
                    "city": "Springfield",
                    "zip": "00000",
                    "country": "USA",
                    "phone": "555-0100",
                    "website": "https://example.com",
                    "industry": "Consumer Electronics",
                    "sector": "Technology",
                    "longBusinessSummary": "Makes things.",
                    "fullTimeEmployees": 161000,
                },
                "summaryDetail": {
                    "priceHint": {"raw": 2, "fmt": "2"},
                    "currency": "USD",
                    "beta": {"raw": 1.308, "fmt": "1.31"},
                    "fiftyTwoWeekLow": {"raw": 124.17, "fmt": "124.17"},
                    "fiftyTwoWeekHigh": {"raw": 198.23, "fmt": "198.23"},
                    "fiftyDayAverage": {"raw": 177.5, "fmt": "177.50"},
                    "twoHundredDayAverage": {"raw": 170.123, "fmt": "170.12"},
                    "dividendRate": {"raw": 0.96, "fmt": "0.96"},
                    "dividendYield": {"raw": 0.0051, "fmt": "0.51%"},
                    "exDividendDate": {"raw": 1699574400, "fmt": "2023-11-10"},
                    "trailingAnnualDividendRate": {"raw": 0.94, "fmt": "0.94"},
                    "trailingAnnualDividendYield": {"raw": 0.004955, "fmt": "0.50%"},
                },
            }
        ],
        "error": None,
    }
}

INDEX_PROFILE_PAYLOAD = {
    "quoteSummary": {
        "result": [
            {
                "summaryDetail": {
                    "priceHint": {"raw": 2, "fmt": "2"},
                    "currency": "USD",
                    "fiftyTwoWeekLow": {"raw": 31429.82, "fmt": "31,429.82"},
                    "fiftyTwoWeekHigh": {"raw": 35679.13, "fmt": "35,679.13"},
                    "fiftyDayAverage": {"raw": 33921.2, "fmt": "33,921.20"},
                    "twoHundredDayAverage": {"raw": 33880.15, "fmt": "33,880.15"},
                },
                "components": {
                    "components": ["AAPL", "MSFT", "JPM"],
                    "maxAge": 86400,
                },
            }
        ],
        "error": None,
    }
}

NOT_FOUND_CHART = {
    "chart": {
        "result": None,
        "error": {"code": "Not Found", "description": "No data found, symbol may be delisted"},
    }
}

NOT_FOUND_SUMMARY = {
    "quoteSummary": {
        "result": None,
        "error": {"code": "Not Found", "description": "Quote not found for ticker symbol: NOPE"},
    }
}
