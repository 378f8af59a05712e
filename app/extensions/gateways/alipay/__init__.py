"""
AliPay gateway extension.

Routes (mounted under /extensions/alipay/):
    POST webhook   - Asynchronous trade notifications
    GET  redirect  - Browser return after checkout
"""
