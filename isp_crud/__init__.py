# isp_crud/__init__.py
