"""MACD result containers and price-file parsing helpers."""