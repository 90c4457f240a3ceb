import io

from PIL import Image

def test_serve_listed_file(client, content):
    response = client.get("/content/Alpha2/ProjA/notes.md")
    assert response.status_code == 200
    assert response.get_data() == (content / "Alpha2" / "ProjA" / "notes.md").read_bytes()
    response.close()

def test_serve_rejects_traversal(client):
    assert client.get("/content/../secret.txt").status_code == 404
    assert client.get("/content/Alpha2/%2e%2e/%2e%2e/secret.txt").status_code == 404

def test_serve_unknown_prefix(client):
    assert client.get("/media/Alpha2/ProjA/notes.md").status_code == 404

def test_thumb(client):
    response = client.get("/thumb?path=content/Alpha2/ProjA/shot1.png")
    assert response.status_code == 200
    assert response.mimetype == "image/jpeg"
    with Image.open(io.BytesIO(response.get_data())) as im:
        assert im.size[0] <= 320 and im.size[1] <= 240

def test_thumb_not_an_image(client):
    assert client.get("/thumb?path=content/Alpha2/ProjA/notes.md").status_code == 404
    # png extension but not image data
    assert client.get("/thumb?path=content/Alpha2/ProjA/shot2.png").status_code == 404

def test_thumb_outside_root(client):
    assert client.get("/thumb?path=content/../outside.png").status_code == 403
    assert client.get("/thumb?path=elsewhere/x.png").status_code == 404
