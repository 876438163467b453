# 📄 File: app/modules/catalog/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The two bits of real logic: searching the plant list and ordering photos.
# 🧪 Purpose (Technical Summary):
# Pure, storage-agnostic domain services.
# 🔗 Dependencies:
# catalog_filter.py, photo_sequencer.py
# 🔄 Connected Modules / Calls From:
# Query and command handlers
