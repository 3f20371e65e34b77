class CredentialNotFound(Exception):
    def __init__(self, *, host_id: str, user: str) -> None:
        super().__init__(
            f"No {user} credential found for host {host_id}. "
            "Ensure provisioning completed successfully."
        )
        self.host_id = host_id
        self.user = user
