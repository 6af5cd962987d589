"""Top-level package for the receipt points service.

The service accepts purchase receipts over HTTP, keeps them in memory and
scores them with a fixed set of loyalty rules.  To run it locally:

```bash
receipt-points
# or
uvicorn receipt_points.api.main:app --port 8080
```
"""

__all__: list[str] = []
