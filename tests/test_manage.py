from manage import main
from wishlist_api.app.core.config import Settings
from wishlist_api.app.core.security import decode_access_token
from wishlist_api.app.stores.sqlite import SQLiteCatalogStore


def test_add_product_seeds_catalog(tmp_path, capsys):
    settings = Settings(database_url=str(tmp_path / "cli.db"))

    assert main(["init-db"], settings=settings) == 0
    assert main(["add-product", "--id", "abc123", "--name", "Widget", "--price", "9.99"], settings=settings) == 0

    product = SQLiteCatalogStore(settings).get_product("ABC123")
    assert product.product_name == "Widget"
    assert "Saved product ABC123" in capsys.readouterr().out


def test_negative_price_is_rejected(tmp_path):
    settings = Settings(database_url=str(tmp_path / "cli.db"))
    assert main(["add-product", "--id", "x", "--name", "X", "--price", "-1"], settings=settings) == 1


def test_db_flag_overrides_database_url(tmp_path):
    db_path = tmp_path / "override.db"
    settings = Settings(database_url=str(tmp_path / "unused.db"))
    assert main(["--db", str(db_path), "init-db"], settings=settings) == 0
    assert db_path.exists()


def test_create_token_uses_identity_claim(capsys):
    settings = Settings(jwt_secret="cli-secret", identity_claim="email")

    assert main(["create-token", "--email", "a@x.com", "--expires", "60"], settings=settings) == 0

    token = capsys.readouterr().out.strip()
    assert decode_access_token(token, "cli-secret")["email"] == "a@x.com"
