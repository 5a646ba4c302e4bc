from dashboard.exceptions import UpstreamError


def test_inventory_returns_items_and_summary(client, auth_headers):
    resp = client.get('/api/inventory', headers=auth_headers)
    assert resp.status_code == 200
    data = resp.get_json()
    assert [item['sku'] for item in data['items']] == ['W-1', 'W-1-B', 'G-1']
    assert data['summary'] == {
        'totalItems': 3,
        'totalStockQty': 13,
        'totalStockValue': 12645,
        'lowStockCount': 1,
        'totalOrders': 0,
        'revenue': 0,
    }
    widget = data['items'][0]
    assert widget['sellingPrice'] == 1234.5
    assert widget['isLow'] is False
    assert widget['sortOrder'] == 2


def test_inventory_on_empty_sheet(client, auth_headers, sheets):
    sheets.sheets['WebsiteItems'] = []
    resp = client.get('/api/inventory', headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json() == {
        'items': [],
        'summary': {
            'totalItems': 0,
            'totalStockQty': 0,
            'totalStockValue': 0,
            'lowStockCount': 0,
            'totalOrders': 0,
            'revenue': 0,
        },
    }


def test_inventory_upstream_failure_is_500(client, auth_headers, sheets, monkeypatch):
    def broken(range_a1):
        raise UpstreamError('Sheets API error 503: backend unavailable')

    monkeypatch.setattr(sheets, 'get_values', broken)
    resp = client.get('/api/inventory', headers=auth_headers)
    assert resp.status_code == 500
    assert 'Sheets API error 503' in resp.get_json()['error']


def test_variants_by_parent_sku(client, auth_headers):
    resp = client.get('/api/variants?parentSku=W-1', headers=auth_headers)
    assert resp.status_code == 200
    variants = resp.get_json()['variants']
    assert [v['sku'] for v in variants] == ['W-1-B']


def test_variants_requires_parent_sku(client, auth_headers):
    resp = client.get('/api/variants', headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Missing parentSku'}


def test_variants_for_unknown_parent_is_empty(client, auth_headers):
    resp = client.get('/api/variants?parentSku=NOPE', headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json() == {'variants': []}


def test_classify_then_inventory_reflects_change(client, auth_headers, sheets):
    resp = client.post(
        '/api/items/classify',
        json={'sku': 'G-1', 'category': 'Gizmos', 'parentId': 'W-1'},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.get_json() == {'success': True}
    assert sheets.writes[-1][0] == 'WebsiteItems!L6:M6'
    assert sheets.writes[-1][1] == [['Gizmos', 'W-1']]

    items = client.get('/api/inventory', headers=auth_headers).get_json()['items']
    gadget = next(item for item in items if item['sku'] == 'G-1')
    assert gadget['category'] == 'Gizmos'
    assert gadget['parentId'] == 'W-1'


def test_classify_trims_sku_before_lookup(client, auth_headers, sheets):
    resp = client.post(
        '/api/items/classify',
        json={'sku': '  W-1 ', 'category': 'Hardware'},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert sheets.writes[-1] == ('WebsiteItems!L2:M2', [['Hardware', '']], 'USER_ENTERED')


def test_classify_unknown_sku_is_400(client, auth_headers, sheets):
    resp = client.post(
        '/api/items/classify',
        json={'sku': 'NOPE', 'category': 'X'},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'SKU not found in sheet: NOPE'}
    assert sheets.writes == []


def test_classify_missing_sku_is_400(client, auth_headers):
    resp = client.post('/api/items/classify', json={'category': 'X'}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Missing SKU'}


def test_meta_writes_contiguous_block(client, auth_headers, sheets):
    resp = client.post(
        '/api/items/meta',
        json={
            'sku': 'W-1',
            'category': 'Tools',
            'promoPrice': '$999.00',
            'promoStart': '2026-01-01',
            'featured': True,
            'visible': 'no',
            'sortOrder': '',
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200
    range_a1, values, _ = sheets.writes[-1]
    assert range_a1 == 'WebsiteItems!L2:T2'
    assert values == [['Tools', '', '', 999, '2026-01-01', '', 'TRUE', 'FALSE', '']]


def test_meta_write_failure_is_500(client, auth_headers, sheets):
    sheets.fail_writes = UpstreamError('Sheets API error 500: internal')
    resp = client.post('/api/items/meta', json={'sku': 'W-1'}, headers=auth_headers)
    assert resp.status_code == 500
    assert resp.get_json() == {'error': 'Sheets API error 500: internal'}


def test_image_update_response(client, auth_headers, sheets):
    resp = client.post(
        '/api/items/image',
        json={'sku': 'W-1-B', 'imageUrl': ' https://img.example/blue.png '},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.get_json() == {
        'success': True,
        'sku': 'W-1-B',
        'row': 3,
        'imageUrl': 'https://img.example/blue.png',
    }
    assert sheets.writes[-1][0] == 'WebsiteItems!K3:K3'


def test_image_update_requires_url(client, auth_headers, sheets):
    resp = client.post('/api/items/image', json={'sku': 'W-1'}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Missing imageUrl'}
    assert sheets.writes == []


def test_create_item_appends_row(client, auth_headers, sheets):
    resp = client.post(
        '/api/items',
        json={
            'name': 'Sprocket',
            'sku': 'S-1',
            'qtyOnHand': 4,
            'reorderLevel': '5',
            'sellingPrice': '$12.00',
            'status': 'Active',
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['success'] is True
    assert data['row'] == 7
    assert data['item']['sku'] == 'S-1'
    assert data['item']['isLow'] is True

    items = client.get('/api/inventory', headers=auth_headers).get_json()['items']
    assert items[-1]['sku'] == 'S-1'
    assert items[-1]['sellingPrice'] == 12


def test_create_item_rejects_duplicate_sku(client, auth_headers, sheets):
    resp = client.post('/api/items', json={'name': 'Again', 'sku': 'W-1'}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'SKU already exists: W-1'}
    assert sheets.writes == []


def test_create_item_requires_name(client, auth_headers):
    resp = client.post('/api/items', json={'sku': 'N-1'}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Missing name'}


def test_invalid_body_type_is_400(client, auth_headers):
    resp = client.post(
        '/api/items/meta',
        json={'sku': 'W-1', 'promoPrice': {'nested': True}},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.get_json()['error'].startswith('Invalid request body')
