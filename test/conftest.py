import zipfile

import pytest

CONTAINER_ENTRIES = {
    "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\nMain-Class: winstone.Launcher\n",
    "winstone/": b"",
    "winstone/Launcher.class": bytes(range(256)) * 8,
    "winstone/LocalStrings.properties": b"Launcher.StartupArgs=[Launcher] - startup args\n",
}


@pytest.fixture
def container_entries():
    return dict(CONTAINER_ENTRIES)


@pytest.fixture
def container_jar(tmp_path):
    path = tmp_path / "winstone-0.9.6.jar"
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in CONTAINER_ENTRIES.items():
            info = zipfile.ZipInfo(name, date_time=(2008, 5, 17, 10, 30, 0))
            info.compress_type = zipfile.ZIP_STORED if name.endswith("/") else zipfile.ZIP_DEFLATED
            zf.writestr(info, data)
    return path


@pytest.fixture
def war_file(tmp_path):
    path = tmp_path / "petstore.war"
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("WEB-INF/web.xml", "<web-app/>")
        zf.writestr("index.jsp", "<html>hello</html>")
    return path
