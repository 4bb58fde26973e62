"""A dependency that watches a Vault agent token file, and a callback notifier."""