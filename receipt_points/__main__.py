from receipt_points.api.main import serve

serve()
